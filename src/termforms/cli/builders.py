"""
Funciones para construir los componentes visuales del formulario.

Solo leen el formulario: campos, foco, errores y dropdown abierto.
"""

from typing import Optional

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from termforms.cli.theme import get_icons, get_palette
from termforms.fields import CheckboxState, Field, SelectState
from termforms.form import Form


def build_value_text(fld: Field, focused: bool) -> Text:
    """Valor del campo; con foco, un campo de texto muestra el cursor."""
    p = get_palette()
    icons = get_icons()
    state = fld.state

    if isinstance(state, CheckboxState):
        icon = icons.checked if state.checked else icons.unchecked
        return Text(icon, style=f"bold {p.success}" if state.checked else p.muted)

    if isinstance(state, SelectState):
        arrow = icons.dropdown_open if state.is_open else icons.dropdown_closed
        text = Text()
        if state.display is None:
            text.append("-- Seleccionar --", style=p.muted)
        else:
            text.append(state.display, style=f"bold {p.accent}")
        text.append(f" {arrow}", style=p.muted)
        return text

    if not focused:
        if state.text:
            return Text(state.text, style=f"bold {p.accent}")
        return Text(state.placeholder or "", style=f"italic {p.muted}")

    text = Text(state.text[:state.cursor], style=f"bold {p.input_text}")
    under_cursor = state.text[state.cursor:state.cursor + 1] or " "
    text.append(under_cursor, style=f"reverse {p.input_text}")
    text.append(state.text[state.cursor + 1:], style=f"bold {p.input_text}")
    if not state.text and state.placeholder:
        text.append(f" {state.placeholder}", style=f"italic {p.muted}")
    return text


def build_form_table(form: Form) -> Table:
    """Construye la tabla de campos."""
    p = get_palette()
    icons = get_icons()

    table = Table(
        title=form.title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
        expand=False,
    )

    table.add_column("", width=1)
    table.add_column("Campo", justify="left", min_width=20)
    table.add_column("Valor", justify="left", min_width=30)

    for idx, fld in enumerate(form.fields):
        is_focused = idx == form.focus_index

        label = fld.label + (" *" if fld.required else "")
        if is_focused:
            pointer = Text(icons.pointer, style=f"bold {p.primary}")
            label_text = Text(label, style=f"bold {p.primary}")
        else:
            pointer = Text("")
            label_text = Text(label, style="bold" if fld.required else p.muted)

        value_text = build_value_text(fld, is_focused)
        if fld.error:
            value_text.append(f"\n{icons.error} {fld.error}", style=p.error)

        table.add_row(pointer, label_text, value_text)

    return table


def build_dropdown(fld: Field) -> Table:
    """Lista de opciones de un select abierto."""
    p = get_palette()
    icons = get_icons()
    state = fld.state

    table = Table(
        title=f"Seleccionar: {fld.label}",
        title_style=f"bold {p.accent}",
        border_style=p.accent,
        box=box.ROUNDED,
        show_header=False,
        padding=(0, 1),
    )
    table.add_column("", width=3)
    table.add_column("Opción", min_width=30)

    for idx, (_, display) in enumerate(state.options):
        mark = icons.selected if idx == state.selected else icons.unselected
        if idx == state.highlighted:
            row_style = f"bold reverse {p.primary}"
            table.add_row(Text(mark, style=row_style), Text(display, style=row_style))
        else:
            table.add_row(Text(mark, style=p.muted), Text(display))

    return table


def build_submit_button(form: Form) -> Text:
    p = get_palette()
    if form.is_submit_focused():
        return Text("[ Enviar ]", style=f"bold reverse {p.success}")
    return Text("  Enviar  ", style=p.muted)


def build_error_summary(form: Form) -> Optional[Text]:
    errors = form.validation_errors
    if not errors:
        return None
    p = get_palette()
    icons = get_icons()
    n = len(errors)
    msg = "1 error de validación" if n == 1 else f"{n} errores de validación"
    return Text(f"{icons.warning} {msg}", style=f"bold {p.error}")


def build_nav_text(form: Form) -> Text:
    """Texto de ayuda con las teclas disponibles."""
    p = get_palette()
    nav = Text()
    if form.dropdown_open:
        nav.append("  [↑↓]", style=f"bold {p.nav_key}")
        nav.append(" Opción  ", style=p.muted)
        nav.append("[Enter]", style=f"bold {p.nav_confirm}")
        nav.append(" Elegir  ", style=p.muted)
        nav.append("[Esc]", style=f"bold {p.nav_cancel}")
        nav.append(" Cerrar", style=p.muted)
        return nav

    nav.append("  [Tab/↑↓]", style=f"bold {p.nav_key}")
    nav.append(" Mover  ", style=p.muted)
    nav.append("[Espacio]", style=f"bold {p.nav_key}")
    nav.append(" Abrir/Marcar  ", style=p.muted)
    nav.append("[Enter]", style=f"bold {p.nav_confirm}")
    nav.append(" Enviar  ", style=p.muted)
    nav.append("[Esc]", style=f"bold {p.nav_cancel}")
    nav.append(" Cancelar", style=p.muted)
    return nav


def build_display(form: Form) -> Group:
    """Construye el display completo del formulario."""
    p = get_palette()
    parts = [build_form_table(form)]

    current_field = form.focused_field
    if current_field is not None and current_field.is_open:
        parts.append(build_dropdown(current_field))

    parts.append(Panel(build_submit_button(form), border_style=p.border, expand=False))

    summary = build_error_summary(form)
    if summary is not None:
        parts.append(summary)

    parts.append(build_nav_text(form))
    return Group(*parts)
