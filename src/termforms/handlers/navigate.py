"""
Teclas de navegación comunes a todos los campos.
"""

from typing import TYPE_CHECKING

from termforms.keys import Key, KeyEvent

if TYPE_CHECKING:
    from termforms.form import Form


def handle_navigate(form: "Form", event: KeyEvent) -> bool:
    """Tab/Shift+Tab, flechas verticales, Esc y Enter sobre el botón de envío."""
    if event.code == Key.TAB:
        form.advance_focus(-1 if event.shift else 1)

    elif event.code == Key.UP:
        form.advance_focus(-1)

    elif event.code == Key.DOWN:
        form.advance_focus(1)

    elif event.code == Key.ESC:
        form.cancel()

    elif event.code == Key.ENTER and form.is_submit_focused():
        form.attempt_submit()

    else:
        return False

    return True
