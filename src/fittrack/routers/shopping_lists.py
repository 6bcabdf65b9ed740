"""API routes for shopping list aggregation and export."""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from fittrack.logging_config import get_logger
from fittrack.normalize.units import standardize
from fittrack.plan.shopping_list import (
    ShoppingItem,
    ShoppingList,
    export_filename,
    render_text,
)
from fittrack.ratelimit import enforce_rate_limit

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/shopping-lists", tags=["shopping-lists"])


# =============================================================================
# Request/Response Schemas
# =============================================================================


class ShoppingItemSchema(BaseModel):
    """Single line in a shopping list."""

    food: str
    quantity: float = 1.0
    measure: str = ""
    category: str = "Other"
    checked: bool = False

    class Config:
        from_attributes = True


class ShoppingItemInput(ShoppingItemSchema):
    """Submitted shopping line; quantity must be a finite number."""

    quantity: float = Field(default=1.0, allow_inf_nan=False)


class ShoppingListRequest(BaseModel):
    """Flat shopping list as produced from a meal plan."""

    name: str = Field(default="Shopping List")
    created_at: datetime | None = None
    items: list[ShoppingItemInput] = Field(default_factory=list)

    def to_shopping_list(self) -> ShoppingList:
        return ShoppingList(
            name=self.name,
            created_at=self.created_at,
            items=[ShoppingItem(**item.model_dump()) for item in self.items],
        )


class AggregatedShoppingListResponse(BaseModel):
    """Shopping list grouped by category with duplicates merged."""

    name: str
    total_items: int
    checked_items: int
    progress: int
    categories: dict[str, list[ShoppingItemSchema]]


class StandardizedQuantityResponse(BaseModel):
    """Quantity converted to a standard shopping unit."""

    quantity: float
    measure: str


# =============================================================================
# Endpoints
# =============================================================================


@router.get("/standardize", response_model=StandardizedQuantityResponse)
async def standardize_quantity(
    quantity: Annotated[
        float,
        Query(description="Amount in the given measure", allow_inf_nan=False),
    ],
    measure: Annotated[str, Query(description="Unit, e.g. g, cup, cloves")] = "",
) -> StandardizedQuantityResponse:
    """Convert a single quantity to its standard shopping unit."""
    std_quantity, std_measure = standardize(quantity, measure)
    return StandardizedQuantityResponse(quantity=std_quantity, measure=std_measure)


@router.post(
    "/aggregate",
    response_model=AggregatedShoppingListResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
async def aggregate_shopping_list(request: ShoppingListRequest) -> AggregatedShoppingListResponse:
    """
    Consolidate a shopping list.

    Quantities are converted to standard units (kg, g, litre, ml, pieces) and
    lines for the same food and unit are merged within each category.
    """
    shopping_list = request.to_shopping_list()
    grouped = shopping_list.items_by_category

    logger.info(
        f"Aggregated shopping list '{shopping_list.name}': "
        f"{shopping_list.total_items} items into {len(grouped)} categories"
    )

    return AggregatedShoppingListResponse(
        name=shopping_list.name,
        total_items=shopping_list.total_items,
        checked_items=shopping_list.checked_items,
        progress=shopping_list.progress,
        categories={
            category: [ShoppingItemSchema.model_validate(item) for item in items]
            for category, items in grouped.items()
        },
    )


@router.post(
    "/export",
    response_class=PlainTextResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
async def export_shopping_list(request: ShoppingListRequest) -> PlainTextResponse:
    """Download the consolidated shopping list as a plain-text document."""
    if not request.items:
        logger.warning("Rejected export of empty shopping list")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No items to export",
        )

    shopping_list = request.to_shopping_list()
    content = render_text(shopping_list)

    logger.info(
        f"Exported shopping list '{shopping_list.name}' ({shopping_list.total_items} items)"
    )

    return PlainTextResponse(
        content=content,
        headers={
            "Content-Disposition": f'attachment; filename="{export_filename()}"',
            "Cache-Control": "no-cache, no-store, must-revalidate",
            "Pragma": "no-cache",
            "Expires": "0",
        },
    )
