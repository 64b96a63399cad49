"""
Modelo de campo del formulario.

Un campo tiene exactamente un sub-estado según su tipo (texto, selección
o checkbox); el tipo se deriva del sub-estado.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from termforms.validation import Validator, Required, run_validators

from .text import TextState
from .select import SelectState
from .checkbox import CheckboxState


class FieldKind(Enum):
    """Tipos de campo disponibles."""
    TEXT = "text"
    SELECT = "select"
    CHECKBOX = "checkbox"


FieldState = Union[TextState, SelectState, CheckboxState]

_KINDS = {
    TextState: FieldKind.TEXT,
    SelectState: FieldKind.SELECT,
    CheckboxState: FieldKind.CHECKBOX,
}


@dataclass(eq=False)
class Field:
    """Unidad editable del formulario."""
    id: str
    label: str
    state: FieldState
    required: bool = False
    validators: List[Validator] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def kind(self) -> FieldKind:
        return _KINDS[type(self.state)]

    @property
    def value(self) -> Union[str, bool]:
        """Valor serializable: texto, valor de opción ('' sin selección) o bool."""
        if isinstance(self.state, CheckboxState):
            return self.state.checked
        if isinstance(self.state, SelectState):
            return self.state.value
        return self.state.text

    @property
    def is_open(self) -> bool:
        """True si es un select con el dropdown abierto."""
        return isinstance(self.state, SelectState) and self.state.is_open

    def check(self) -> Optional[str]:
        """Evalúa la validez sin modificar el campo. Retorna el mensaje de error."""
        if isinstance(self.state, CheckboxState):
            if self.required and not self.state.checked:
                return f"{self.label} debe estar marcado"
            return None

        validators = list(self.validators)
        if self.required:
            validators.insert(0, Required())
        return run_validators(str(self.value), validators)

    def validate(self) -> bool:
        """Re-deriva ``error`` a partir del valor actual."""
        self.error = self.check()
        return self.error is None

    def set_value(self, value: Union[str, bool]) -> None:
        """Asigna un valor desde código (no desde el teclado)."""
        if isinstance(self.state, CheckboxState):
            if not isinstance(value, bool):
                raise TypeError(f"{self.id}: se esperaba bool, no {type(value).__name__}")
            changed = value != self.state.checked
            self.state.checked = value
        else:
            if not isinstance(value, str):
                raise TypeError(f"{self.id}: se esperaba str, no {type(value).__name__}")
            if isinstance(self.state, SelectState):
                changed = self.state.select_value(value)
            else:
                changed = self.state.set_text(value)
        if changed:
            self.error = None
