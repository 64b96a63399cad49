"""
Excepciones del motor de formularios.
"""


class FormConfigError(ValueError):
    """Error de configuración detectado al construir el formulario."""


class FormWriteError(OSError):
    """Fallo al persistir los valores del formulario."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"No se pudo escribir {path}: {reason}")
