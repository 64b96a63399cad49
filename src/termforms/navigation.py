"""
Manejo del foco entre campos.

El anillo de foco tiene ``field_count + 1`` posiciones: los campos en
orden y, al final, el botón virtual de envío.
"""


class FocusManager:
    """Índice de foco con avance circular."""

    def __init__(self, field_count: int):
        self.field_count = field_count
        self.current_index = 0

    @property
    def size(self) -> int:
        return self.field_count + 1

    def is_submit_focused(self) -> bool:
        return self.current_index == self.field_count

    def advance(self, direction: int) -> None:
        """Mueve el foco +1/-1 con vuelta al inicio/final."""
        step = 1 if direction >= 0 else -1
        self.current_index = (self.current_index + step) % self.size

    def focus_field(self, index: int) -> None:
        if 0 <= index < self.field_count:
            self.current_index = index