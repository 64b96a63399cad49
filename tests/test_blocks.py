"""Tests para la expansión de bloques compuestos."""

import pytest

from termforms import AddressBlock, ContactBlock, DateRangeBlock, FormConfigError, expand_block
from termforms.blocks import US_STATES
from termforms.fields import FieldKind, SelectState


def by_id(fields):
    return {f.id: f for f in fields}


class TestAddressBlock:
    """Tests para el bloque de dirección."""

    def test_ids_and_order(self):
        fields = expand_block(AddressBlock(group="ship", required=True))
        assert [f.id for f in fields] == [
            "ship_street1", "ship_street2", "ship_city", "ship_state", "ship_zip",
        ]

    @pytest.mark.parametrize("required", [True, False])
    def test_street2_never_required(self, required):
        fields = by_id(expand_block(AddressBlock(group="ship", required=required)))
        assert fields["ship_street2"].required is False
        for suffix in ("street1", "city", "state", "zip"):
            assert fields[f"ship_{suffix}"].required is required

    def test_state_is_select_over_states(self):
        state = by_id(expand_block(AddressBlock(group="ship")))["ship_state"]
        assert state.kind == FieldKind.SELECT
        assert isinstance(state.state, SelectState)
        assert [value for value, _ in state.state.options] == [abbr for abbr, _ in US_STATES]
        assert len(state.state.options) == 51
        assert ("CA", "California (CA)") in state.state.options

    def test_zip_pattern(self):
        zip_field = by_id(expand_block(AddressBlock(group="ship")))["ship_zip"]
        zip_field.set_value("1234")
        assert zip_field.check() is not None
        zip_field.set_value("12345-6789")
        assert zip_field.check() is None

    def test_expansions_are_independent(self):
        block = AddressBlock(group="ship")
        first = expand_block(block)
        second = expand_block(block)
        first[0].set_value("Main St")
        assert second[0].value == ""


class TestContactBlock:
    """Tests para el bloque de contacto."""

    def test_fields(self):
        fields = expand_block(ContactBlock(group="buyer"))
        assert [f.id for f in fields] == ["buyer_name", "buyer_email", "buyer_phone"]
        assert not any(f.required for f in fields)

    def test_required_propagates_to_phone(self):
        fields = by_id(expand_block(ContactBlock(group="buyer", required=True)))
        assert all(f.required for f in fields.values())

    def test_email_validator(self):
        email = by_id(expand_block(ContactBlock(group="buyer")))["buyer_email"]
        email.set_value("no-es-email")
        assert email.check() == "Email inválido"

    def test_phone_validator(self):
        phone = by_id(expand_block(ContactBlock(group="buyer")))["buyer_phone"]
        phone.set_value("(555) 123-4567")
        assert phone.check() is None
        phone.set_value("12")
        assert phone.check() is not None


class TestDateRangeBlock:
    """Tests para el bloque de rango de fechas."""

    def test_fields(self):
        fields = expand_block(DateRangeBlock(group="trip", required=True))
        assert [f.id for f in fields] == ["trip_start", "trip_end"]
        assert all(f.required for f in fields)

    def test_each_date_pattern_checked(self):
        start, end = expand_block(DateRangeBlock(group="trip"))
        start.set_value("2024/01/01")
        assert start.check() is not None

    def test_order_not_enforced(self):
        start, end = expand_block(DateRangeBlock(group="trip"))
        start.set_value("2024-12-31")
        end.set_value("2024-01-01")
        assert start.check() is None
        assert end.check() is None


class TestBlockErrors:
    """Tests de errores de configuración de bloques."""

    @pytest.mark.parametrize("block_cls", [AddressBlock, ContactBlock, DateRangeBlock])
    @pytest.mark.parametrize("group", ["", "   "])
    def test_empty_group_rejected(self, block_cls, group):
        with pytest.raises(FormConfigError):
            expand_block(block_cls(group=group))
