import pytest

from hexmorph.graphics.settings import DrawSettings
from hexmorph.input.cursor import CursorMode, apply_cursor


def test_hex_params_centered_on_window():
    state = DrawSettings()

    assert apply_cursor(state, CursorMode.HEX_PARAMS, (400.0, 400.0), (800, 800))
    assert state.a == 0.0
    assert state.b == 0.0


def test_hex_params_span_ten_units():
    state = DrawSettings()
    apply_cursor(state, CursorMode.HEX_PARAMS, (800.0, 0.0), (800, 800))

    assert state.a == pytest.approx(5.0)
    assert state.b == pytest.approx(-5.0)


def test_offset_mode_flips_y():
    state = DrawSettings(a=0.1, b=0.6)
    apply_cursor(state, CursorMode.OFFSET, (600.0, 200.0), (800, 800))

    assert state.offset == pytest.approx((0.25, 0.25))
    assert (state.a, state.b) == (0.1, 0.6)


def test_zero_sized_window_ignored():
    state = DrawSettings()

    assert not apply_cursor(state, CursorMode.OFFSET, (1.0, 1.0), (0, 600))
    assert state.offset == (0.0, 0.0)


def test_mode_toggles_back_and_forth():
    assert CursorMode.HEX_PARAMS.toggled() is CursorMode.OFFSET
    assert CursorMode.OFFSET.toggled() is CursorMode.HEX_PARAMS
