"""
CLI de termforms.

Incluye el loop interactivo sobre Rich y un formulario de ejemplo:
- demo: formulario de datos de envío que guarda el resultado en JSON
"""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from termforms.cli.theme import CLITheme, ThemeName, get_console, print_error, print_success, print_warning
from termforms.exceptions import FormWriteError
from termforms.form import FormResult

app = typer.Typer(
    name="termforms",
    help="Formularios interactivos para terminal.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Mostrar logs de depuración"),
):
    """termforms - Formularios interactivos para terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=get_console(), show_path=False)],
        )


@app.command()
def demo(
    output: Path = typer.Option(Path("shipping.json"), "--output", "-o", help="Archivo JSON de salida"),
    theme: ThemeName = typer.Option(ThemeName.DEFAULT, "--theme", "-t", help="Tema de colores"),
):
    """Formulario de ejemplo con datos de envío."""
    from termforms.cli.demo import shipping_form
    from termforms.cli.main import run_form
    from termforms.serializer import to_json, write

    CLITheme.set_theme(theme)
    form = shipping_form()
    result = run_form(form)

    if result != FormResult.SUBMITTED:
        print_warning("Formulario cancelado")
        raise typer.Exit(1)

    try:
        write(form, output)
    except FormWriteError as exc:
        print_error(str(exc))
        raise typer.Exit(1)

    print_success(f"Datos guardados en {output}")
    get_console().print_json(to_json(form))


__all__ = ["app", "main", "demo"]
