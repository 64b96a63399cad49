"""
Campos del formulario y sus sub-estados por tipo.
"""

from .models import Field, FieldKind, FieldState
from .text import TextState
from .select import SelectState
from .checkbox import CheckboxState

__all__ = [
    "Field",
    "FieldKind",
    "FieldState",
    "TextState",
    "SelectState",
    "CheckboxState",
]
