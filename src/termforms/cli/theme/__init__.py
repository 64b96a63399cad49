"""
Tema visual de la CLI: paletas de colores e iconos.
"""

from termforms.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)
from termforms.cli.theme.icons import IconSet, get_icons, reset_icons_cache
from termforms.cli.theme.printing import print_success, print_warning, print_error

__all__ = [
    "ThemeName",
    "ColorPalette",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    "IconSet",
    "get_icons",
    "reset_icons_cache",
    "print_success",
    "print_warning",
    "print_error",
]
