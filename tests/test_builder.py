"""Tests para la construcción de formularios."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from termforms import (
    AddressBlock,
    CheckboxFieldSpec,
    ContactBlock,
    FormBuilder,
    FormConfigError,
    FormResult,
    SelectFieldSpec,
    TextFieldSpec,
    build_form,
)
from termforms.fields import FieldKind
from termforms.validation import MinLength


class TestSpecs:
    """Tests para las especificaciones de campos."""

    def test_specs_are_frozen(self):
        spec = TextFieldSpec(id="a", label="A")
        with pytest.raises(PydanticValidationError):
            spec.label = "B"

    def test_empty_id_rejected(self):
        with pytest.raises(PydanticValidationError):
            TextFieldSpec(id="", label="A")

    def test_validators_must_implement_validate(self):
        with pytest.raises(PydanticValidationError):
            TextFieldSpec(id="a", label="A", validators=[object()])

    def test_to_field(self):
        fld = TextFieldSpec(id="a", label="A", placeholder="ph", initial="x", required=True).to_field()
        assert fld.kind == FieldKind.TEXT
        assert fld.value == "x"
        assert fld.state.placeholder == "ph"
        assert fld.required

    def test_select_initial_unknown_option(self):
        fld = SelectFieldSpec(id="s", label="S", options=[("a", "A")], initial="z").to_field()
        assert fld.value == ""

    def test_with_initial(self):
        spec = CheckboxFieldSpec(id="c", label="C")
        assert spec.with_initial(True).to_field().value is True
        assert spec.to_field().value is False


class TestFormBuilder:
    """Tests para FormBuilder y build_form."""

    def test_fluent_build(self):
        form = (
            FormBuilder()
            .title("Pedido")
            .text("name", "Nombre", required=True, validators=[MinLength(2)])
            .select("size", "Talle", options=[("s", "S"), ("m", "M")], initial="m")
            .checkbox("gift", "Regalo", initial=True)
            .block(ContactBlock(group="buyer"))
            .build()
        )
        assert form.title == "Pedido"
        assert [f.id for f in form.fields] == [
            "name", "size", "gift", "buyer_name", "buyer_email", "buyer_phone",
        ]
        assert form.get_field("size").value == "m"
        assert form.get_field("gift").value is True
        assert form.result() == FormResult.ACTIVE
        assert form.focus_index == 0

    def test_add_spec(self):
        form = FormBuilder().add(TextFieldSpec(id="a", label="A")).build()
        assert form.get_field("a") is not None

    def test_duplicate_ids_rejected(self):
        builder = FormBuilder().text("a", "A").checkbox("a", "A otra vez")
        with pytest.raises(FormConfigError, match="duplicado"):
            builder.build()

    def test_block_collision_rejected(self):
        builder = FormBuilder().text("ship_city", "Ciudad").block(AddressBlock(group="ship"))
        with pytest.raises(FormConfigError):
            builder.build()

    def test_empty_group_rejected(self):
        with pytest.raises(FormConfigError):
            FormBuilder().block(AddressBlock(group="")).build()

    def test_values_override_initial(self):
        form = FormBuilder().text("a", "A", initial="x").checkbox("c", "C").build(
            values={"a": "y", "c": True},
        )
        assert form.get_field("a").value == "y"
        assert form.get_field("c").value is True

    def test_values_for_block_fields(self):
        form = build_form([AddressBlock(group="ship")], values={"ship_state": "CA"})
        assert form.get_field("ship_state").value == "CA"

    def test_values_unknown_id_rejected(self):
        with pytest.raises(FormConfigError, match="inexistentes"):
            FormBuilder().text("a", "A").build(values={"b": "x"})

    @pytest.mark.parametrize("values", [
        {"newsletter": "no"},
        {"newsletter": 1},
        {"name": 5},
        {"size": 2},
    ])
    def test_values_wrong_type_rejected(self, values):
        builder = (
            FormBuilder()
            .text("name", "Nombre")
            .select("size", "Talle", options=[("s", "S"), ("m", "M")])
            .checkbox("newsletter", "Newsletter")
        )
        with pytest.raises(FormConfigError, match="inválido"):
            builder.build(values=values)

    def test_values_keep_spec_settings(self):
        form = (
            FormBuilder()
            .text("name", "Nombre", required=True, validators=[MinLength(3)])
            .build(values={"name": "ab"})
        )
        fld = form.get_field("name")
        assert fld.value == "ab"
        assert fld.check() == "Mínimo 3 caracteres"

    def test_empty_form(self):
        form = build_form([])
        assert form.fields == ()
        assert form.is_submit_focused()
