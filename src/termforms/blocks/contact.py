"""
Bloque de datos de contacto.
"""

from typing import List

from termforms.config import ContactBlock, FieldSpec, TextFieldSpec
from termforms.validation import Email, Pattern


def contact_specs(block: ContactBlock) -> List[FieldSpec]:
    """name, email y phone."""
    g = block.group
    return [
        TextFieldSpec(
            id=f"{g}_name",
            label="Nombre completo",
            placeholder="Juan Pérez",
            required=block.required,
        ),
        TextFieldSpec(
            id=f"{g}_email",
            label="Email",
            placeholder="juan@example.com",
            required=block.required,
            validators=(Email(),),
        ),
        TextFieldSpec(
            id=f"{g}_phone",
            label="Teléfono",
            placeholder="(555) 123-4567",
            required=block.required,
            validators=(Pattern.phone(),),
        ),
    ]
