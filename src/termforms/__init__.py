"""
termforms - Motor de formularios para terminal.

Describe campos y bloques de forma declarativa y obtiene un formulario
que maneja foco, edición, validación y extracción de datos, sin depender
de cómo se dibuja en pantalla.
"""

__version__ = "0.1.0"

from termforms.keys import Key, KeyEvent, key
from termforms.exceptions import FormConfigError, FormWriteError
from termforms.validation import (
    Validator,
    ValidationError,
    Required,
    Email,
    MinLength,
    MaxLength,
    Pattern,
)
from termforms.fields import Field, FieldKind
from termforms.config import (
    TextFieldSpec,
    SelectFieldSpec,
    CheckboxFieldSpec,
    AddressBlock,
    ContactBlock,
    DateRangeBlock,
)
from termforms.blocks import expand_block
from termforms.form import Form, FormResult
from termforms.builder import FormBuilder, build_form
from termforms.serializer import to_flat_map, to_json, write

__all__ = [
    "Key",
    "KeyEvent",
    "key",
    "FormConfigError",
    "FormWriteError",
    "Validator",
    "ValidationError",
    "Required",
    "Email",
    "MinLength",
    "MaxLength",
    "Pattern",
    "Field",
    "FieldKind",
    "TextFieldSpec",
    "SelectFieldSpec",
    "CheckboxFieldSpec",
    "AddressBlock",
    "ContactBlock",
    "DateRangeBlock",
    "expand_block",
    "Form",
    "FormResult",
    "FormBuilder",
    "build_form",
    "to_flat_map",
    "to_json",
    "write",
]
