"""Text view configuration surface."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum


class Alignment(str, Enum):
    """Horizontal placement of display lines inside the view."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextViewConfigError(ValueError):
    """Raised when a configuration value violates its precondition."""

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        super().__init__(message)
        self.field_name = field_name


@dataclass(frozen=True, slots=True)
class TextViewConfig:
    scrollable: bool = True
    wrap: bool = True
    word_wrap: bool = False
    align: Alignment = Alignment.LEFT
    dynamic_colors: bool = False
    regions: bool = False
    tab_size: int = 4
    text_color: str = "white"
    background_color: str = "black"

    def __post_init__(self) -> None:
        if isinstance(self.align, str) and not isinstance(self.align, Alignment):
            try:
                object.__setattr__(self, "align", Alignment(self.align.lower()))
            except ValueError as exc:
                raise TextViewConfigError(
                    f"Unknown alignment '{self.align}'", field_name="align"
                ) from exc
        if not isinstance(self.align, Alignment):
            raise TextViewConfigError(
                f"align must be an Alignment, got {self.align!r}", field_name="align"
            )
        if isinstance(self.tab_size, bool) or not isinstance(self.tab_size, int):
            raise TextViewConfigError(
                "tab_size must be an integer", field_name="tab_size"
            )
        if self.tab_size < 0:
            raise TextViewConfigError(
                "tab_size must not be negative", field_name="tab_size"
            )


# Changing any of these means the current display index no longer matches.
LAYOUT_FIELDS = frozenset(
    {"wrap", "word_wrap", "align", "dynamic_colors", "regions", "text_color"}
)

FIELD_NAMES = frozenset(f.name for f in fields(TextViewConfig))


def check_field_names(changes: dict[str, object]) -> None:
    unknown = sorted(set(changes) - FIELD_NAMES)
    if unknown:
        raise TextViewConfigError(
            f"Unknown configuration field(s): {', '.join(unknown)}",
            field_name=unknown[0],
        )


__all__ = [
    "Alignment",
    "TextViewConfig",
    "TextViewConfigError",
    "LAYOUT_FIELDS",
    "check_field_names",
]
