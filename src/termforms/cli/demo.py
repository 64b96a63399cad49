"""
Formulario de ejemplo: datos de envío.
"""

from termforms.builder import FormBuilder
from termforms.config import AddressBlock
from termforms.form import Form
from termforms.validation import Email, Pattern


def shipping_form() -> Form:
    """Nombre, email, teléfono, dirección de envío y aceptación de términos."""
    return (
        FormBuilder()
        .title("Datos de envío")
        .text("name", "Nombre completo", placeholder="Juan Pérez", required=True)
        .text(
            "email", "Email",
            placeholder="juan@example.com",
            required=True,
            validators=[Email()],
        )
        .text("phone", "Teléfono", placeholder="(555) 123-4567", validators=[Pattern.phone()])
        .block(AddressBlock(group="shipping", required=True))
        .checkbox("newsletter", "Suscribirse al newsletter")
        .checkbox("terms", "Acepto los términos y condiciones", required=True)
        .build()
    )
