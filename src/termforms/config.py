"""Especificaciones inmutables para construir formularios."""

from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field as PydanticField, field_validator

from termforms.fields import Field, TextState, SelectState, CheckboxState


class _Spec(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


# ============================================================================
# Especificaciones de campos
# ============================================================================

class _FieldSpec(_Spec):
    id: str = PydanticField(..., min_length=1, description="Identificador único (clave de salida)")
    label: str = PydanticField(..., description="Etiqueta visible")
    required: bool = False

    def with_initial(self, value: Any) -> "_FieldSpec":
        """Copia con otro valor inicial (rehidratación)."""
        return type(self).model_validate({**dict(self), "initial": value})


class _ValidatedFieldSpec(_FieldSpec):
    validators: Tuple[Any, ...] = ()

    @field_validator("validators")
    @classmethod
    def check_validators(cls, v: Tuple[Any, ...]) -> Tuple[Any, ...]:
        for validator in v:
            if not callable(getattr(validator, "validate", None)):
                raise ValueError(f"{validator!r} no implementa validate(text)")
        return v


class TextFieldSpec(_ValidatedFieldSpec):
    """Campo de texto de una línea."""
    placeholder: Optional[str] = None
    initial: str = PydanticField("", strict=True)

    def to_field(self) -> Field:
        return Field(
            id=self.id,
            label=self.label,
            state=TextState(text=self.initial, placeholder=self.placeholder),
            required=self.required,
            validators=list(self.validators),
        )


class SelectFieldSpec(_ValidatedFieldSpec):
    """Campo de selección sobre una lista de (valor, etiqueta)."""
    options: List[Tuple[str, str]] = PydanticField(default_factory=list)
    initial: Optional[str] = PydanticField(None, strict=True)

    def to_field(self) -> Field:
        state = SelectState(options=list(self.options))
        if self.initial:
            # Un valor inicial que no es opción deja el campo sin selección
            idx = state.index_of(self.initial)
            if idx is not None:
                state = SelectState(options=list(self.options), selected=idx)
        return Field(
            id=self.id,
            label=self.label,
            state=state,
            required=self.required,
            validators=list(self.validators),
        )


class CheckboxFieldSpec(_FieldSpec):
    """Campo booleano. Si es requerido debe quedar marcado."""
    initial: bool = PydanticField(False, strict=True)

    def to_field(self) -> Field:
        return Field(
            id=self.id,
            label=self.label,
            state=CheckboxState(checked=self.initial),
            required=self.required,
        )


FieldSpec = Union[TextFieldSpec, SelectFieldSpec, CheckboxFieldSpec]


# ============================================================================
# Descriptores de bloques compuestos
# ============================================================================

class _BlockSpec(_Spec):
    group: str = PydanticField(..., description="Prefijo de los ids generados")
    required: bool = False
    title: Optional[str] = None


class AddressBlock(_BlockSpec):
    """Dirección de EE.UU.: calle, línea 2, ciudad, estado y código postal."""


class ContactBlock(_BlockSpec):
    """Contacto: nombre, email y teléfono."""


class DateRangeBlock(_BlockSpec):
    """Rango de fechas: inicio y fin (YYYY-MM-DD)."""


BlockSpec = Union[AddressBlock, ContactBlock, DateRangeBlock]
