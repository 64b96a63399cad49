"""
Bloques compuestos: plantillas que se expanden a varios campos con ids
``{group}_{sufijo}`` y validadores ya asignados.
"""

from typing import List

from termforms.config import AddressBlock, BlockSpec, ContactBlock, DateRangeBlock, FieldSpec
from termforms.exceptions import FormConfigError
from termforms.fields import Field

from .address import US_STATES, address_specs
from .contact import contact_specs
from .date_range import date_range_specs

_EXPANDERS = {
    AddressBlock: address_specs,
    ContactBlock: contact_specs,
    DateRangeBlock: date_range_specs,
}


def block_specs(block: BlockSpec) -> List[FieldSpec]:
    """Especificaciones de los campos que genera el bloque."""
    if not block.group or not block.group.strip():
        raise FormConfigError(f"{type(block).__name__}: el grupo no puede estar vacío")
    expander = _EXPANDERS.get(type(block))
    if expander is None:
        raise FormConfigError(f"Bloque desconocido: {type(block).__name__}")
    return expander(block)


def expand_block(block: BlockSpec) -> List[Field]:
    """Expande el bloque a campos concretos, en orden."""
    return [spec.to_field() for spec in block_specs(block)]


__all__ = [
    "US_STATES",
    "block_specs",
    "expand_block",
    "address_specs",
    "contact_specs",
    "date_range_specs",
]
