"""
Construcción de formularios a partir de especificaciones.

El builder solo acumula especificaciones; todas las verificaciones
(ids duplicados, grupos vacíos, valores para ids desconocidos) se hacen
en ``build()`` y un error impide crear el formulario.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from pydantic import ValidationError as PydanticValidationError

from termforms.blocks import block_specs
from termforms.config import (
    AddressBlock,
    BlockSpec,
    CheckboxFieldSpec,
    ContactBlock,
    DateRangeBlock,
    FieldSpec,
    SelectFieldSpec,
    TextFieldSpec,
)
from termforms.exceptions import FormConfigError
from termforms.form import Form

logger = logging.getLogger(__name__)

_BLOCK_TYPES = (AddressBlock, ContactBlock, DateRangeBlock)

FormItem = Union[FieldSpec, BlockSpec]


def flatten_specs(items: Iterable[FormItem]) -> List[FieldSpec]:
    """Expande los bloques y retorna las especificaciones de campo en orden."""
    specs: List[FieldSpec] = []
    for item in items:
        if isinstance(item, _BLOCK_TYPES):
            specs.extend(block_specs(item))
        else:
            specs.append(item)
    return specs


def build_form(
    items: Iterable[FormItem],
    title: Optional[str] = None,
    values: Optional[Mapping[str, Any]] = None,
) -> Form:
    """
    Construye un Form.

    Args:
        items: Especificaciones de campo y/o descriptores de bloque, en orden
        title: Título del formulario
        values: Valores iniciales por id; reemplazan los de las especificaciones

    Raises:
        FormConfigError: ids duplicados, grupo vacío, o id desconocido o valor
            de tipo incorrecto en ``values``
    """
    specs = flatten_specs(items)

    if values:
        known = {spec.id for spec in specs}
        unknown = [key for key in values if key not in known]
        if unknown:
            raise FormConfigError(f"Valores para campos inexistentes: {', '.join(unknown)}")
        try:
            specs = [
                spec.with_initial(values[spec.id]) if spec.id in values else spec
                for spec in specs
            ]
        except PydanticValidationError as exc:
            raise FormConfigError(f"Valor inicial inválido: {exc}") from exc

    form = Form([spec.to_field() for spec in specs], title=title)
    logger.debug("formulario construido: %d campos", len(form.fields))
    return form


class FormBuilder:
    """Builder encadenable de formularios."""

    def __init__(self):
        self._title: Optional[str] = None
        self._items: List[FormItem] = []

    def title(self, title: str) -> "FormBuilder":
        self._title = title
        return self

    def add(self, item: FormItem) -> "FormBuilder":
        """Agrega una especificación de campo o un bloque ya construido."""
        self._items.append(item)
        return self

    def text(
        self,
        id: str,
        label: str,
        placeholder: Optional[str] = None,
        initial: str = "",
        required: bool = False,
        validators: Sequence[Any] = (),
    ) -> "FormBuilder":
        return self.add(TextFieldSpec(
            id=id, label=label, placeholder=placeholder,
            initial=initial, required=required, validators=tuple(validators),
        ))

    def select(
        self,
        id: str,
        label: str,
        options: Sequence[Tuple[str, str]],
        initial: Optional[str] = None,
        required: bool = False,
        validators: Sequence[Any] = (),
    ) -> "FormBuilder":
        return self.add(SelectFieldSpec(
            id=id, label=label, options=list(options),
            initial=initial, required=required, validators=tuple(validators),
        ))

    def checkbox(
        self,
        id: str,
        label: str,
        initial: bool = False,
        required: bool = False,
    ) -> "FormBuilder":
        return self.add(CheckboxFieldSpec(id=id, label=label, initial=initial, required=required))

    def block(self, block: BlockSpec) -> "FormBuilder":
        return self.add(block)

    def build(self, values: Optional[Mapping[str, Any]] = None) -> Form:
        return build_form(self._items, title=self._title, values=values)
