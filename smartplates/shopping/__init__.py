"""Grocery list generation module."""

from smartplates.shopping.export import export_grocery_list_as_text
from smartplates.shopping.grocery_list import (
    GroceryItem,
    GroceryList,
    GroceryListOptions,
    build_categories,
    generate_grocery_list,
)

__all__ = [
    "GroceryItem",
    "GroceryList",
    "GroceryListOptions",
    "build_categories",
    "export_grocery_list_as_text",
    "generate_grocery_list",
]
