"""
Bloque de rango de fechas.

Cada fecha se valida por separado contra YYYY-MM-DD; el bloque no
verifica que el inicio sea anterior o igual al fin.
"""

from typing import List

from termforms.config import DateRangeBlock, FieldSpec, TextFieldSpec
from termforms.validation import Pattern


def date_range_specs(block: DateRangeBlock) -> List[FieldSpec]:
    g = block.group
    return [
        TextFieldSpec(
            id=f"{g}_{suffix}",
            label=label,
            placeholder="YYYY-MM-DD",
            required=block.required,
            validators=(Pattern.date(),),
        )
        for suffix, label in (("start", "Fecha inicio"), ("end", "Fecha fin"))
    ]
