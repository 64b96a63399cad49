"""
Despacho de teclas para el formulario.

La acción depende de la tecla, del tipo del campo con foco y de si hay
un dropdown abierto. Un dropdown abierto consume Tab, flechas, Enter,
Espacio y Esc antes que la navegación del formulario; así Esc cierra el
dropdown sin cancelar el formulario.
"""

from typing import TYPE_CHECKING

from termforms.fields import FieldKind
from termforms.keys import KeyEvent

from .navigate import handle_navigate
from .text import handle_text
from .select import handle_select, handle_open_select
from .checkbox import handle_checkbox

if TYPE_CHECKING:
    from termforms.form import Form

_FIELD_HANDLERS = {
    FieldKind.TEXT: handle_text,
    FieldKind.SELECT: handle_select,
    FieldKind.CHECKBOX: handle_checkbox,
}


def dispatch_key(form: "Form", event: KeyEvent) -> bool:
    """
    Aplica una tecla al formulario. Teclas sin efecto se ignoran.

    Retorna True si la tecla confirmó una opción de un dropdown abierto.
    """
    current_field = form.focused_field

    if current_field is not None and current_field.is_open:
        return handle_open_select(form, current_field, event)

    if handle_navigate(form, event):
        return False

    if current_field is None:
        return False

    if _FIELD_HANDLERS[current_field.kind](current_field, event):
        # Cambió el valor: el error se vuelve a calcular al validar
        current_field.error = None
    return False


__all__ = ["dispatch_key"]
