"""
Handlers para campos de selección (dropdown cerrado y abierto).
"""

from typing import TYPE_CHECKING

from termforms.fields import Field
from termforms.keys import Key, KeyEvent

if TYPE_CHECKING:
    from termforms.form import Form


def handle_select(field: Field, event: KeyEvent) -> bool:
    """Dropdown cerrado: Espacio lo abre."""
    if event.code == Key.SPACE and not event.ctrl:
        field.state.open()
    return False


def handle_open_select(form: "Form", field: Field, event: KeyEvent) -> bool:
    """
    Dropdown abierto: navegar opciones, confirmar o descartar.

    Retorna True si se confirmó una opción.
    """
    state = field.state

    if event.code == Key.TAB:
        state.close()
        form.advance_focus(-1 if event.shift else 1)

    elif event.code == Key.UP:
        state.move_highlight(-1)

    elif event.code == Key.DOWN:
        state.move_highlight(1)

    elif event.code in (Key.ENTER, Key.SPACE):
        if state.commit():
            field.error = None
        return True

    elif event.code == Key.ESC:
        state.close()

    return False
