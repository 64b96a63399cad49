"""
Edición de campos de texto.
"""

from termforms.fields import Field
from termforms.keys import Key, KeyEvent


def handle_text(field: Field, event: KeyEvent) -> bool:
    """Edita el texto. Retorna True si cambió el valor."""
    state = field.state

    if event.ctrl:
        if event.is_ctrl("a"):
            state.move_home()
        elif event.is_ctrl("e"):
            state.move_end()
        elif event.is_ctrl("u"):
            return state.clear()
        return False

    if event.code == Key.LEFT:
        state.move_left()
    elif event.code == Key.RIGHT:
        state.move_right()
    elif event.code == Key.HOME:
        state.move_home()
    elif event.code == Key.END:
        state.move_end()
    elif event.code == Key.BACKSPACE:
        return state.backspace()
    elif event.code == Key.DELETE:
        return state.delete()
    else:
        return state.insert(event.char)

    return False
