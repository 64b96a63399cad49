"""
Funciones que imprimen mensajes con estilo en la consola.
"""

from rich.text import Text

from termforms.cli.theme.icons import get_icons
from termforms.cli.theme.palette import get_console, get_palette


def print_success(text: str) -> None:
    """Imprime mensaje de éxito."""
    p = get_palette()
    get_console().print(Text(f"{get_icons().checked} {text}", style=f"bold {p.success}"))


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    p = get_palette()
    get_console().print(Text(f"{get_icons().warning} {text}", style=p.warning))


def print_error(text: str) -> None:
    """Imprime error."""
    p = get_palette()
    get_console().print(Text(f"{get_icons().error} {text}", style=f"bold {p.error}"))
