"""
Validadores incorporados.

MinLength, MaxLength, Email y Pattern aceptan el texto vacío: ese caso
lo cubre Required, así un campo vacío reporta un solo error.
"""

import re
from typing import Optional


class Required:
    """Falla si el texto está vacío (o solo tiene espacios)."""

    def __init__(self, message: str = "Campo requerido"):
        self.message = message

    def validate(self, text: str) -> Optional[str]:
        if not text.strip():
            return self.message
        return None

    def __repr__(self) -> str:
        return "Required()"


class Email:
    """Dirección de email: un solo '@', parte local no vacía, dominio con punto."""

    message = "Email inválido"

    def validate(self, text: str) -> Optional[str]:
        if not text:
            return None

        parts = text.split("@")
        if len(parts) != 2:
            return self.message

        local, domain = parts
        if not local or not domain or "." not in domain:
            return self.message

        # Sin etiquetas vacías: "a@.com", "a@b." o "a@b..c"
        if any(not label for label in domain.split(".")):
            return self.message

        return None

    def __repr__(self) -> str:
        return "Email()"


class MinLength:
    """Largo mínimo en caracteres."""

    def __init__(self, n: int):
        self.n = n

    def validate(self, text: str) -> Optional[str]:
        if text and len(text) < self.n:
            return f"Mínimo {self.n} caracteres"
        return None

    def __repr__(self) -> str:
        return f"MinLength({self.n})"


class MaxLength:
    """Largo máximo en caracteres."""

    def __init__(self, n: int):
        self.n = n

    def validate(self, text: str) -> Optional[str]:
        if text and len(text) > self.n:
            return f"Máximo {self.n} caracteres"
        return None

    def __repr__(self) -> str:
        return f"MaxLength({self.n})"


class Pattern:
    """
    Falla si el texto no coincide completo con la expresión regular.

    La expresión se compila al construir el validador, de modo que una
    expresión inválida falla al armar el formulario y no al validar.
    """

    def __init__(self, expr: str, message: str):
        self.regex = re.compile(expr)
        self.message = message

    def validate(self, text: str) -> Optional[str]:
        if not text:
            return None
        if self.regex.fullmatch(text) is None:
            return self.message
        return None

    @classmethod
    def zip_code(cls) -> "Pattern":
        """Código postal de EE.UU.: 12345 o 12345-6789."""
        return cls(r"\d{5}(-\d{4})?", "Código postal inválido (12345 o 12345-6789)")

    @classmethod
    def phone(cls) -> "Pattern":
        """Teléfono de EE.UU., con o sin +1, paréntesis y separadores."""
        return cls(
            r"(\+1[-.\s]?)?(\(?\d{3}\)?[-.\s]?)?\d{3}[-.\s]?\d{4}",
            "Teléfono inválido",
        )

    @classmethod
    def date(cls) -> "Pattern":
        """Fecha con forma YYYY-MM-DD (no verifica que exista)."""
        return cls(r"\d{4}-\d{2}-\d{2}", "Fecha inválida (usar YYYY-MM-DD)")

    def __repr__(self) -> str:
        return f"Pattern({self.regex.pattern!r})"
