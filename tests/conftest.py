"""Configuración de pytest para tests de termforms."""

import pytest

from termforms import FormBuilder, KeyEvent
from termforms.cli.theme import reset_icons_cache


def _press(form, *codes, shift=False, ctrl=False):
    for code in codes:
        form.handle_key(KeyEvent(code, shift=shift, ctrl=ctrl))


def _type_text(form, text):
    _press(form, *["space" if c == " " else c for c in text])


@pytest.fixture
def press():
    """Envía una secuencia de teclas al formulario."""
    return _press


@pytest.fixture
def type_text():
    """Escribe texto caracter por caracter (' ' como tecla espacio)."""
    return _type_text


@pytest.fixture
def name_newsletter_form():
    """Nombre requerido (vacío) y checkbox opcional sin marcar."""
    return (
        FormBuilder()
        .text("name", "Nombre", required=True)
        .checkbox("newsletter", "Newsletter")
        .build()
    )


@pytest.fixture
def priority_form():
    """Un select con selección inicial 'medium'."""
    return (
        FormBuilder()
        .select(
            "priority", "Prioridad",
            options=[("low", "Baja"), ("medium", "Media"), ("high", "Alta")],
            initial="medium",
        )
        .text("notes", "Notas")
        .build()
    )


@pytest.fixture(autouse=True)
def reset_icons():
    """Cada test detecta de nuevo el soporte Unicode."""
    reset_icons_cache()
    yield
    reset_icons_cache()
