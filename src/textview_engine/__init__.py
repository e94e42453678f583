"""UI-agnostic scrollable text view engine."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "config",
    "keymaps",
    "layout",
    "markup",
    "render",
    "runtime",
    "view",
    "viewport",
]

__version__ = "0.1.0"
