"""Textual host for the text view engine."""

from .controller import TextualHooks, TextualTextViewAdapter, normalize_textual_key
from .widget import TextViewWidget

__all__ = [
    "TextualHooks",
    "TextualTextViewAdapter",
    "TextViewWidget",
    "normalize_textual_key",
]
