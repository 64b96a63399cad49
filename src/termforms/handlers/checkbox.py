"""
Handler para campos checkbox.
"""

from termforms.fields import Field
from termforms.keys import Key, KeyEvent


def handle_checkbox(field: Field, event: KeyEvent) -> bool:
    if event.code == Key.SPACE and not event.ctrl:
        return field.state.toggle()
    return False
