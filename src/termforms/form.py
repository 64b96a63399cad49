"""
Máquina de estados del formulario.

El formulario es dueño de sus campos, del foco y del resultado. Toda la
entrada llega por ``handle_key``; los renderizadores solo leen.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from termforms.exceptions import FormConfigError
from termforms.fields import Field
from termforms.handlers import dispatch_key
from termforms.keys import Key, KeyEvent
from termforms.navigation import FocusManager
from termforms.validation import ValidationError

logger = logging.getLogger(__name__)


class FormResult(Enum):
    """Estado del formulario. SUBMITTED y CANCELLED son terminales."""
    ACTIVE = "active"
    SUBMITTED = "submitted"
    CANCELLED = "cancelled"


class Form:
    """Formulario con campos, foco y validación."""

    def __init__(self, fields: Iterable[Field], title: Optional[str] = None):
        self._fields: List[Field] = list(fields)
        self.title = title

        seen = set()
        for fld in self._fields:
            if fld.id in seen:
                raise FormConfigError(f"Id de campo duplicado: {fld.id!r}")
            seen.add(fld.id)

        self._focus = FocusManager(len(self._fields))
        self._result = FormResult.ACTIVE
        self._validation_errors: List[ValidationError] = []
        # Esc inmediatamente posterior a confirmar un dropdown
        self._absorb_esc = False

    # ------------------------------------------------------------------
    # Vista de solo lectura
    # ------------------------------------------------------------------

    @property
    def fields(self) -> Tuple[Field, ...]:
        return tuple(self._fields)

    @property
    def focus_index(self) -> int:
        """Índice del campo con foco; ``len(fields)`` es el botón de envío."""
        return self._focus.current_index

    @property
    def focused_field(self) -> Optional[Field]:
        if self._focus.is_submit_focused():
            return None
        return self._fields[self._focus.current_index]

    @property
    def dropdown_open(self) -> bool:
        fld = self.focused_field
        return fld is not None and fld.is_open

    @property
    def validation_errors(self) -> List[ValidationError]:
        """Errores del último intento de envío."""
        return list(self._validation_errors)

    def is_submit_focused(self) -> bool:
        return self._focus.is_submit_focused()

    def get_field(self, field_id: str) -> Optional[Field]:
        """Obtiene un campo por su id."""
        for fld in self._fields:
            if fld.id == field_id:
                return fld
        return None

    def result(self) -> FormResult:
        return self._result

    def is_active(self) -> bool:
        return self._result == FormResult.ACTIVE

    # ------------------------------------------------------------------
    # Operaciones
    # ------------------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> None:
        """
        Procesa una tecla. Sin efecto si el formulario ya terminó.

        El primer Esc después de confirmar una opción de un dropdown no
        cancela; cualquier otra tecla vuelve a habilitar la cancelación.
        """
        if not self.is_active():
            return
        absorb_esc, self._absorb_esc = self._absorb_esc, False
        if absorb_esc and event.code == Key.ESC:
            return
        self._absorb_esc = dispatch_key(self, event)

    def advance_focus(self, direction: int) -> None:
        """Mueve el foco al siguiente (+1) o anterior (-1), con vuelta."""
        if not self.is_active():
            return
        fld = self.focused_field
        if fld is not None and fld.is_open:
            fld.state.close()
        self._focus.advance(direction)
        logger.debug("foco -> %d", self._focus.current_index)

    def attempt_submit(self) -> bool:
        """
        Valida todos los campos en orden.

        Cada campo recalcula su error. Si alguno falla, el foco pasa al
        primero con error y el formulario sigue activo.
        """
        if not self.is_active():
            return self._result == FormResult.SUBMITTED

        fld = self.focused_field
        if fld is not None and fld.is_open:
            fld.state.close()

        self._validation_errors = []
        first_invalid = None
        for idx, fld in enumerate(self._fields):
            if not fld.validate():
                self._validation_errors.append(ValidationError(fld.id, fld.error))
                if first_invalid is None:
                    first_invalid = idx

        if first_invalid is not None:
            self._focus.focus_field(first_invalid)
            logger.debug(
                "envío rechazado: %d errores, primero en %r",
                len(self._validation_errors), self._fields[first_invalid].id,
            )
            return False

        self._result = FormResult.SUBMITTED
        logger.info("formulario enviado (%d campos)", len(self._fields))
        return True

    def cancel(self) -> None:
        """Cancela sin validar."""
        if not self.is_active():
            return
        self._result = FormResult.CANCELLED
        logger.info("formulario cancelado")

    def set_value(self, field_id: str, value: Union[str, bool]) -> None:
        """Asigna el valor de un campo desde código."""
        fld = self.get_field(field_id)
        if fld is None:
            raise KeyError(field_id)
        fld.set_value(value)
