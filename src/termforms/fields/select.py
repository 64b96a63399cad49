"""
Estado de un campo de selección (dropdown).
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass
class SelectState:
    """
    Opciones (valor, etiqueta), opción confirmada y opción resaltada.

    ``highlighted`` solo cambia con el dropdown abierto; al cerrarlo sin
    confirmar vuelve a la opción seleccionada.
    """
    options: List[Tuple[str, str]] = field(default_factory=list)
    selected: Optional[int] = None
    highlighted: int = 0
    is_open: bool = False

    def __post_init__(self):
        if self.selected is not None and not 0 <= self.selected < len(self.options):
            self.selected = None
        self.highlighted = self.selected if self.selected is not None else 0

    @property
    def value(self) -> str:
        """Valor confirmado, o '' si no hay selección."""
        if self.selected is None:
            return ""
        return self.options[self.selected][0]

    @property
    def display(self) -> Optional[str]:
        """Etiqueta de la opción confirmada."""
        if self.selected is None:
            return None
        return self.options[self.selected][1]

    def index_of(self, value: str) -> Optional[int]:
        for idx, (opt_value, _) in enumerate(self.options):
            if opt_value == value:
                return idx
        return None

    def open(self) -> None:
        if not self.options:
            return
        self.is_open = True
        self.highlighted = self.selected if self.selected is not None else 0

    def close(self) -> None:
        """Cierra descartando el cambio de resaltado."""
        self.is_open = False
        self.highlighted = self.selected if self.selected is not None else 0

    def move_highlight(self, step: int) -> None:
        if self.options:
            self.highlighted = (self.highlighted + step) % len(self.options)

    def commit(self) -> bool:
        """Confirma la opción resaltada y cierra. Retorna True si cambió el valor."""
        self.is_open = False
        if not self.options:
            return False
        changed = self.selected != self.highlighted
        self.selected = self.highlighted
        return changed

    def select_value(self, value: str) -> bool:
        """Selecciona por valor; '' deja el campo sin selección."""
        if value == "":
            idx = None
        else:
            idx = self.index_of(value)
            if idx is None:
                raise ValueError(f"Opción desconocida: {value!r}")
        changed = idx != self.selected
        self.selected = idx
        self.close()
        return changed
