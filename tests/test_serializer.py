"""Tests para la serialización de valores."""

import json

import pytest

from termforms import (
    AddressBlock,
    CheckboxFieldSpec,
    FormBuilder,
    FormWriteError,
    SelectFieldSpec,
    TextFieldSpec,
    build_form,
    to_flat_map,
    to_json,
    write,
)


@pytest.fixture
def order_form():
    return (
        FormBuilder()
        .text("name", "Nombre", required=True)
        .select("size", "Talle", options=[("s", "S"), ("m", "M")])
        .checkbox("gift", "Regalo")
        .block(AddressBlock(group="shipping"))
        .build()
    )


class TestFlatMap:
    """Tests para el mapa plano de valores."""

    def test_declaration_order_and_types(self, order_form):
        flat = to_flat_map(order_form)
        assert list(flat) == [
            "name", "size", "gift",
            "shipping_street1", "shipping_street2", "shipping_city",
            "shipping_state", "shipping_zip",
        ]
        assert flat["name"] == ""
        assert flat["size"] == ""
        assert flat["gift"] is False

    def test_round_trip_rehydration(self):
        items = [
            TextFieldSpec(id="name", label="Nombre"),
            SelectFieldSpec(id="size", label="Talle", options=[("s", "S"), ("m", "M")]),
            CheckboxFieldSpec(id="gift", label="Regalo"),
            AddressBlock(group="shipping", required=True),
        ]
        form = build_form(items)
        form.set_value("name", "Ann")
        form.set_value("size", "m")
        form.set_value("gift", True)
        form.set_value("shipping_street1", "1 Main St")
        form.set_value("shipping_state", "NY")
        form.set_value("shipping_zip", "10001")

        flat = to_flat_map(form)
        rehydrated = build_form(items, values=flat)
        assert to_flat_map(rehydrated) == flat


class TestJson:
    """Tests para la exportación a JSON."""

    def test_flat_json_object(self, order_form):
        order_form.set_value("shipping_zip", "12345")
        data = json.loads(to_json(order_form))
        assert data["shipping_zip"] == "12345"
        assert "shipping" not in data
        assert all(not isinstance(v, (dict, list)) for v in data.values())

    def test_write(self, order_form, tmp_path):
        order_form.set_value("name", "Añil")
        path = write(order_form, tmp_path / "out.json")
        data = json.loads(path.read_text(encoding="utf-8"))
        assert data == to_flat_map(order_form)
        assert list(data) == list(to_flat_map(order_form))

    def test_write_failure_surfaces_and_keeps_state(self, order_form, tmp_path):
        order_form.set_value("name", "Ann")
        before = to_flat_map(order_form)
        with pytest.raises(FormWriteError) as excinfo:
            write(order_form, tmp_path / "no-existe" / "out.json")
        assert isinstance(excinfo.value, OSError)
        assert isinstance(excinfo.value.__cause__, OSError)
        assert to_flat_map(order_form) == before
        assert order_form.is_active()
