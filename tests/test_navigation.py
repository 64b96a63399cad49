"""Tests para el anillo de foco."""

from termforms.navigation import FocusManager


class TestFocusManager:
    """Tests de avance circular entre campos y botón de envío."""

    def test_ring_includes_submit(self):
        focus = FocusManager(2)
        assert focus.size == 3
        focus.advance(1)
        focus.advance(1)
        assert focus.is_submit_focused()
        focus.advance(1)
        assert focus.current_index == 0

    def test_backwards_wraps_to_submit(self):
        focus = FocusManager(2)
        focus.advance(-1)
        assert focus.is_submit_focused()

    def test_empty_form_always_on_submit(self):
        focus = FocusManager(0)
        assert focus.is_submit_focused()
        focus.advance(1)
        assert focus.is_submit_focused()

    def test_focus_field_ignores_out_of_range(self):
        focus = FocusManager(2)
        focus.focus_field(1)
        assert focus.current_index == 1
        focus.focus_field(5)
        assert focus.current_index == 1
