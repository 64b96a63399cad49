"""
Loop interactivo del formulario.
"""

import logging
import shutil
from typing import Callable, Optional

from rich.console import Console
from rich.live import Live

from termforms.cli.builders import build_display
from termforms.cli.terminal import clear_screen, get_key
from termforms.cli.theme import get_console
from termforms.form import Form, FormResult
from termforms.keys import KeyEvent

logger = logging.getLogger(__name__)


def run_form(
    form: Form,
    read_key: Callable[[], Optional[KeyEvent]] = get_key,
    console: Optional[Console] = None,
    clear: bool = True,
) -> FormResult:
    """
    Muestra el formulario y le entrega teclas hasta que termine.

    Args:
        form: Formulario a editar
        read_key: Fuente de teclas (None = tecla no reconocida)
        console: Consola Rich; por defecto la consola con tema
        clear: Si limpia la pantalla al empezar

    Returns:
        FormResult.SUBMITTED o FormResult.CANCELLED
    """
    if console is None:
        console = get_console()

    last_terminal_size = shutil.get_terminal_size()
    if clear:
        clear_screen()

    with Live(console=console, auto_refresh=False, screen=False) as live:
        live.update(build_display(form), refresh=True)

        while form.is_active():
            event = read_key()
            if event is None:
                # Tecla no reconocida, no actualizar display
                continue

            if event.is_ctrl("c"):
                form.cancel()
            else:
                form.handle_key(event)

            # Reiniciar Live si cambió el tamaño del terminal
            current_size = shutil.get_terminal_size()
            if current_size != last_terminal_size:
                live.stop()
                if clear:
                    clear_screen()
                last_terminal_size = current_size
                live.start()

            live.update(build_display(form), refresh=True)

    logger.debug("loop terminado: %s", form.result().value)
    return form.result()
