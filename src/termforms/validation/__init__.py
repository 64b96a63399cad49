"""
Validación de valores de campos.

Un validador es cualquier objeto con un método ``validate(text)`` que
retorna ``None`` si el texto es válido o un mensaje de error si no lo es.
Los validadores de un campo se ejecutan en orden y el primero que falla
determina el error.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Protocol, runtime_checkable

from .rules import Required, Email, MinLength, MaxLength, Pattern


@runtime_checkable
class Validator(Protocol):
    """Capacidad de validación sobre el texto de un campo."""

    def validate(self, text: str) -> Optional[str]:
        ...


@dataclass(frozen=True)
class ValidationError:
    """Error de validación asociado a un campo."""
    field_id: str
    message: str


def run_validators(text: str, validators: Iterable[Validator]) -> Optional[str]:
    """Ejecuta los validadores en orden; retorna el primer mensaje de error."""
    for validator in validators:
        message = validator.validate(text)
        if message:
            return message
    return None

__all__ = [
    "Validator",
    "ValidationError",
    "run_validators",
    "Required",
    "Email",
    "MinLength",
    "MaxLength",
    "Pattern",
]
