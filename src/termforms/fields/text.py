"""
Estado de edición de un campo de texto de una línea.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class TextState:
    """Texto actual y posición del cursor (0 <= cursor <= len(text))."""
    text: str = ""
    cursor: Optional[int] = None
    placeholder: Optional[str] = None

    def __post_init__(self):
        if self.cursor is None:
            self.cursor = len(self.text)
        self.cursor = max(0, min(self.cursor, len(self.text)))

    def insert(self, char: str) -> bool:
        """Inserta en la posición del cursor y lo avanza."""
        if not char:
            return False
        self.text = self.text[:self.cursor] + char + self.text[self.cursor:]
        self.cursor += len(char)
        return True

    def backspace(self) -> bool:
        """Borra el caracter anterior al cursor."""
        if self.cursor == 0:
            return False
        self.text = self.text[:self.cursor - 1] + self.text[self.cursor:]
        self.cursor -= 1
        return True

    def delete(self) -> bool:
        """Borra el caracter bajo el cursor."""
        if self.cursor >= len(self.text):
            return False
        self.text = self.text[:self.cursor] + self.text[self.cursor + 1:]
        return True

    def move_left(self) -> None:
        self.cursor = max(0, self.cursor - 1)

    def move_right(self) -> None:
        self.cursor = min(len(self.text), self.cursor + 1)

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.text)

    def clear(self) -> bool:
        """Vacía el texto (Ctrl+U)."""
        changed = bool(self.text)
        self.text = ""
        self.cursor = 0
        return changed

    def set_text(self, text: str) -> bool:
        changed = text != self.text
        self.text = text
        self.cursor = len(text)
        return changed
