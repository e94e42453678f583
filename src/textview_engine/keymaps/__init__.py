"""Key handling: bindings from keys to navigation actions."""

from .models import ActionRef, Binding, KeyInput
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .defaults import DEFAULT_ACTIONS, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyInput",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "DEFAULT_ACTIONS",
    "load_default_keymaps",
]
