"""
Eventos de teclado consumidos por el formulario.

Las teclas especiales se identifican por nombre ('tab', 'enter', ...),
igual que las devuelve el lector de terminal. Cualquier otro código de
un solo caracter es un caracter imprimible.
"""

from dataclasses import dataclass


class Key:
    """Nombres de teclas especiales."""
    TAB = "tab"
    ENTER = "enter"
    ESC = "esc"
    SPACE = "space"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    BACKSPACE = "backspace"
    DELETE = "delete"


@dataclass(frozen=True)
class KeyEvent:
    """Una tecla con sus modificadores."""
    code: str
    shift: bool = False
    ctrl: bool = False

    @property
    def char(self) -> str:
        """Caracter a insertar, o '' si la tecla no es imprimible."""
        if self.ctrl:
            return ""
        if self.code == Key.SPACE:
            return " "
        if len(self.code) == 1 and self.code.isprintable():
            return self.code
        return ""

    def is_ctrl(self, letter: str) -> bool:
        """True si es Ctrl + la letra indicada."""
        return self.ctrl and self.code.lower() == letter


def key(code: str, shift: bool = False, ctrl: bool = False) -> KeyEvent:
    """Atajo para construir un KeyEvent."""
    return KeyEvent(code=code, shift=shift, ctrl=ctrl)
