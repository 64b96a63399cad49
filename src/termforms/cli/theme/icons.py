"""
Iconos Unicode con fallback automático a ASCII.
"""

import sys
from dataclasses import dataclass
from typing import Optional


def _detect_unicode_support() -> bool:
    """Detecta si el terminal soporta caracteres Unicode."""
    try:
        encoding = getattr(sys.stdout, "encoding", None) or "ascii"
        "❯◉○✓✗▾▴".encode(encoding)
        return True
    except (UnicodeEncodeError, LookupError):
        return False


@dataclass
class IconSet:
    """Conjunto de iconos para la interfaz."""
    pointer: str      # Campo con foco / opción resaltada
    checked: str      # Checkbox marcado
    unchecked: str    # Checkbox sin marcar
    selected: str     # Opción confirmada en el dropdown
    unselected: str
    error: str
    warning: str
    dropdown_closed: str
    dropdown_open: str


ICONS_UNICODE = IconSet(
    pointer="❯",
    checked="[✓]",
    unchecked="[ ]",
    selected="◉",
    unselected="○",
    error="✗",
    warning="⚠",
    dropdown_closed="▾",
    dropdown_open="▴",
)

ICONS_ASCII = IconSet(
    pointer=">",
    checked="[x]",
    unchecked="[ ]",
    selected="(*)",
    unselected="( )",
    error="[x]",
    warning="[!]",
    dropdown_closed="v",
    dropdown_open="^",
)


_active_icons: Optional[IconSet] = None


def get_icons() -> IconSet:
    """Obtiene el conjunto de iconos apropiado para el terminal."""
    global _active_icons
    if _active_icons is None:
        _active_icons = ICONS_UNICODE if _detect_unicode_support() else ICONS_ASCII
    return _active_icons


def reset_icons_cache() -> None:
    """Resetea el cache de iconos (útil para tests)."""
    global _active_icons
    _active_icons = None
