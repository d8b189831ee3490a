"""Plain-text rendering of grocery lists for download or printing."""

from smartplates.shopping.grocery_list import GroceryItem, GroceryList

UNCHECKED = "☐"
CHECKED = "☑"


def _format_item(item: GroceryItem, include_costs: bool, show_category: bool) -> str:
    mark = CHECKED if item.is_purchased else UNCHECKED
    line = f"{mark} {item.display_name}"
    if item.quantity:
        amount = f"{item.quantity:g} {item.unit}" if item.unit else f"{item.quantity:g}"
        line += f" ({amount})"
    if show_category and item.category:
        line += f" - {item.category}"
    if include_costs and item.estimated_cost is not None:
        line += f"  ~${item.estimated_cost:.2f}"
    return line


def export_grocery_list_as_text(
    grocery_list: GroceryList,
    include_costs: bool = False,
    group_by_category: bool = False,
) -> str:
    """Render a grocery list as a checklist.

    Args:
        grocery_list: The list to render
        include_costs: Append estimated costs and the total (if estimated)
        group_by_category: One section per store category instead of a flat list

    Returns:
        The rendered text, newline terminated
    """
    lines = [grocery_list.name, "=" * max(20, len(grocery_list.name)), ""]

    if group_by_category:
        buckets: dict[str, list[GroceryItem]] = {}
        for item in grocery_list.items:
            buckets.setdefault(item.category, []).append(item)
        for category, items in buckets.items():
            lines.append(f"{category}:")
            lines.extend(f"  {_format_item(item, include_costs, False)}" for item in items)
            lines.append("")
    else:
        lines.extend(_format_item(item, include_costs, True) for item in grocery_list.items)
        lines.append("")

    if include_costs and grocery_list.total_estimated_cost is not None:
        lines.append(f"Estimated total: ${grocery_list.total_estimated_cost:.2f}")

    lines.append(f"{grocery_list.items_count} items, {grocery_list.purchased_count} purchased")
    return "\n".join(lines) + "\n"
