"""Shopping list aggregation and export."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import date, datetime

from fittrack.logging_config import get_logger
from fittrack.normalize.units import format_quantity, round_half_up, standardize

logger = get_logger(__name__)

RULE_WIDTH = 60
CATEGORY_RULE_WIDTH = 50


@dataclass
class ShoppingItem:
    """A single line in a shopping list."""

    food: str
    quantity: float
    measure: str
    category: str
    checked: bool = False

    @property
    def merge_key(self) -> tuple[str | None, str]:
        """Case-insensitive food name and measure used for merging within a category."""
        food = self.food.lower() if self.food is not None else None
        return food, self.measure

    def display_quantity(self) -> str:
        """Get human-readable quantity string, empty when nothing useful to show."""
        if self.quantity > 0 and self.quantity != 1:
            return f"{format_quantity(self.quantity)} {self.measure}"
        if self.measure != "unit":
            return self.measure or ""
        return ""


def standardize_item(item: ShoppingItem) -> ShoppingItem:
    """Return a copy of the item with its quantity and measure standardized."""
    quantity, measure = standardize(item.quantity, item.measure)
    return replace(item, quantity=quantity, measure=measure)


def aggregate_shopping_items(
    items: Iterable[ShoppingItem],
) -> dict[str, list[ShoppingItem]]:
    """
    Group shopping items by category, merging duplicates.

    Items merge when they share a category, a case-insensitive food name and
    a standardized measure. The merged entry keeps the food casing and
    checked flag of the first item seen; its quantity is the sum of the
    standardized quantities. Categories and items keep first-seen order.

    Args:
        items: Shopping items in any units. Not modified.

    Returns:
        Dict mapping category to its merged, standardized items.
    """
    aggregated: dict[str, dict[tuple[str | None, str], ShoppingItem]] = {}
    count = 0

    for item in items:
        count += 1
        standardized = standardize_item(item)
        category_items = aggregated.setdefault(standardized.category, {})
        key = standardized.merge_key

        if key in category_items:
            category_items[key].quantity += standardized.quantity
        else:
            category_items[key] = standardized

    result = {category: list(merged.values()) for category, merged in aggregated.items()}

    logger.debug(
        f"Aggregated {count} items into "
        f"{sum(len(v) for v in result.values())} lines across {len(result)} categories"
    )

    return result


@dataclass
class ShoppingList:
    """A named shopping list with progress tracking."""

    name: str
    items: list[ShoppingItem] = field(default_factory=list)
    created_at: datetime | None = None

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def checked_items(self) -> int:
        return sum(1 for item in self.items if item.checked)

    @property
    def progress(self) -> int:
        """Percentage of items checked off, rounded to a whole percent."""
        if not self.items:
            return 0
        return round_half_up(self.checked_items / self.total_items * 100)

    @property
    def items_by_category(self) -> dict[str, list[ShoppingItem]]:
        return aggregate_shopping_items(self.items)


# =============================================================================
# Export
# =============================================================================


def export_filename(on: date | None = None) -> str:
    """Get the download filename for a text export made on the given day."""
    on = on or date.today()
    return f"FitTrack_Shopping_List_{on.isoformat()}.txt"


def render_text(shopping_list: ShoppingList, downloaded_on: date | None = None) -> str:
    """
    Render a shopping list as a printable plain-text document.

    Items are aggregated by category first, so each line is one consolidated
    purchase in a standard unit.
    """
    downloaded_on = downloaded_on or date.today()
    rule = "═" * RULE_WIDTH

    lines = [rule, "FITTRACK SHOPPING LIST", rule, "", shopping_list.name]
    if shopping_list.created_at is not None:
        lines.append(f"Generated: {shopping_list.created_at.date().isoformat()}")
    lines.append(
        f"Items: {shopping_list.total_items} | "
        f"Purchased: {shopping_list.checked_items} | "
        f"Progress: {shopping_list.progress}%"
    )
    lines.extend([rule, ""])

    for category, items in shopping_list.items_by_category.items():
        lines.append(str(category).upper())
        lines.append("-" * CATEGORY_RULE_WIDTH)
        for item in items:
            mark = "✓" if item.checked else "○"
            quantity = item.display_quantity()
            prefix = f"{quantity} - " if quantity else ""
            lines.append(f"{mark} {prefix}{item.food}")
        lines.append("")

    lines.append(rule)
    lines.append(f"Downloaded from FitTrack • {downloaded_on.isoformat()}")

    return "\n".join(lines) + "\n"
