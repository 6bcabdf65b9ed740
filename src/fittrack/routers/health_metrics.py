"""API routes for health metrics."""

from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status
from pydantic import BaseModel

from fittrack.health.bmi import calculate_bmi, get_bmi_category
from fittrack.logging_config import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/health-metrics", tags=["health-metrics"])


class BMIResponse(BaseModel):
    """BMI value with its WHO category."""

    bmi: float
    category: str
    label: str
    color: str
    recommendation: str


@router.get("/bmi", response_model=BMIResponse)
async def classify_bmi(
    bmi: Annotated[float | None, Query(description="Precomputed BMI value")] = None,
    weight_kg: Annotated[float | None, Query(description="Body weight in kg")] = None,
    height_cm: Annotated[float | None, Query(description="Height in cm")] = None,
) -> BMIResponse:
    """
    Classify a BMI value.

    Pass either ``bmi`` directly or both ``weight_kg`` and ``height_cm``.
    """
    if bmi is None:
        if weight_kg is None or height_cm is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Provide bmi, or both weight_kg and height_cm",
            )
        try:
            bmi = calculate_bmi(weight_kg, height_cm)
        except ValueError as e:
            logger.warning(f"Invalid BMI inputs: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=str(e),
            )
    elif bmi <= 0:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"BMI must be positive, got {bmi}",
        )

    category = get_bmi_category(bmi)

    return BMIResponse(
        bmi=bmi,
        category=category.key,
        label=category.label,
        color=category.color,
        recommendation=category.recommendation,
    )
