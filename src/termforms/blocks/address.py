"""
Bloque de dirección postal de EE.UU.
"""

from typing import List

from termforms.config import AddressBlock, FieldSpec, SelectFieldSpec, TextFieldSpec
from termforms.validation import Pattern

# Abreviatura y nombre; incluye el Distrito de Columbia
US_STATES = [
    ("AL", "Alabama"),
    ("AK", "Alaska"),
    ("AZ", "Arizona"),
    ("AR", "Arkansas"),
    ("CA", "California"),
    ("CO", "Colorado"),
    ("CT", "Connecticut"),
    ("DE", "Delaware"),
    ("FL", "Florida"),
    ("GA", "Georgia"),
    ("HI", "Hawaii"),
    ("ID", "Idaho"),
    ("IL", "Illinois"),
    ("IN", "Indiana"),
    ("IA", "Iowa"),
    ("KS", "Kansas"),
    ("KY", "Kentucky"),
    ("LA", "Louisiana"),
    ("ME", "Maine"),
    ("MD", "Maryland"),
    ("MA", "Massachusetts"),
    ("MI", "Michigan"),
    ("MN", "Minnesota"),
    ("MS", "Mississippi"),
    ("MO", "Missouri"),
    ("MT", "Montana"),
    ("NE", "Nebraska"),
    ("NV", "Nevada"),
    ("NH", "New Hampshire"),
    ("NJ", "New Jersey"),
    ("NM", "New Mexico"),
    ("NY", "New York"),
    ("NC", "North Carolina"),
    ("ND", "North Dakota"),
    ("OH", "Ohio"),
    ("OK", "Oklahoma"),
    ("OR", "Oregon"),
    ("PA", "Pennsylvania"),
    ("RI", "Rhode Island"),
    ("SC", "South Carolina"),
    ("SD", "South Dakota"),
    ("TN", "Tennessee"),
    ("TX", "Texas"),
    ("UT", "Utah"),
    ("VT", "Vermont"),
    ("VA", "Virginia"),
    ("WA", "Washington"),
    ("WV", "West Virginia"),
    ("WI", "Wisconsin"),
    ("WY", "Wyoming"),
    ("DC", "District of Columbia"),
]


def address_specs(block: AddressBlock) -> List[FieldSpec]:
    """street1, street2 (siempre opcional), city, state, zip."""
    g = block.group
    return [
        TextFieldSpec(
            id=f"{g}_street1",
            label="Dirección",
            placeholder="123 Main St",
            required=block.required,
        ),
        TextFieldSpec(
            id=f"{g}_street2",
            label="Dirección (línea 2)",
            placeholder="Apto, oficina, unidad (opcional)",
        ),
        TextFieldSpec(
            id=f"{g}_city",
            label="Ciudad",
            required=block.required,
        ),
        SelectFieldSpec(
            id=f"{g}_state",
            label="Estado",
            options=[(abbr, f"{name} ({abbr})") for abbr, name in US_STATES],
            required=block.required,
        ),
        TextFieldSpec(
            id=f"{g}_zip",
            label="Código postal",
            placeholder="12345 o 12345-6789",
            required=block.required,
            validators=(Pattern.zip_code(),),
        ),
    ]
