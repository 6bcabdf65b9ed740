"""Shopping list logic for meal plans."""

from fittrack.plan.shopping_list import (
    ShoppingItem,
    ShoppingList,
    aggregate_shopping_items,
    export_filename,
    render_text,
    standardize_item,
)

__all__ = [
    "ShoppingItem",
    "ShoppingList",
    "aggregate_shopping_items",
    "export_filename",
    "render_text",
    "standardize_item",
]
