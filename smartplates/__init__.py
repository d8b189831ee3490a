"""SmartPlates - recipe discovery, meal planning and grocery lists."""

__version__ = "1.0.0"
