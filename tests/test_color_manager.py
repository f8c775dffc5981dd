"""
Unit tests for ColorManager
"""

import pytest

from managers.color_manager import ColorManager
from models.color import Color


RAW = {
    'red': [255, 0, 0],
    'green': [0, 255, 0],
    'blue': [0, 0, 255],
    'pink': [255, 170, 203],
}


def _data(**overrides):
    data = {
        'palette': RAW,
        'palette_order': list(RAW.keys()),
        'fallback_color': 'pink',
    }
    data.update(overrides)
    return data


def test_colors_parsed():
    cm = ColorManager(_data())

    assert len(cm.colors) == len(RAW)
    assert cm.get_color('red') == Color(255, 0, 0)
    assert all(isinstance(c, Color) for c in cm.colors.values())


def test_palette_order_preserved():
    order = ['blue', 'red', 'green']
    cm = ColorManager(_data(palette_order=order))

    assert cm.palette_order == order


def test_order_defaults_to_definition_order():
    cm = ColorManager(_data(palette_order=None))

    assert cm.palette_order == list(RAW.keys())


def test_fallback_defaults_to_first_in_order():
    cm = ColorManager(_data(palette_order=['green', 'red'], fallback_color=None))

    assert cm.fallback_color == 'green'


def test_order_with_unknown_color_rejected():
    with pytest.raises(ValueError):
        ColorManager(_data(palette_order=['red', 'ultraviolet']))


def test_get_unknown_color_raises_key_error():
    cm = ColorManager(_data())

    with pytest.raises(KeyError):
        cm.get_color('ultraviolet')
