"""Terminal widgets drawn onto a character-cell screen: frames, lists, pages and grid layout arithmetic."""

__version__ = "0.1.0"

__all__ = [
    "primitive",
    "frame",
    "list_model",
    "list_view",
    "grid_layout",
    "pages",
]