"""Tests for `core/symbol.py`"""

import pytest

from zbar_ctypes.common import EnumItem
from zbar_ctypes.core.symbol import SymbolType, Config, Modifier, Orientation, resolve


def test_symbol_types():
    assert SymbolType.QRCODE == 64
    assert SymbolType.EAN13 == 13
    assert str(SymbolType.lookup_value(128)) == 'CODE128'
    assert SymbolType.lookup_value(3) == 3
    assert len(SymbolType) == 21


def test_config_mask_skips_wide_values():
    assert Config.set_from_mask(0b11) == {Config.ENABLE, Config.ADD_CHECK}
    assert Config.set_from_mask(0xffffffff) == {Config.ENABLE, Config.ADD_CHECK, Config.EMIT_CHECK,
                                                Config.ASCII, Config.BINARY}


def test_modifiers():
    assert Modifier.set_from_mask(0b10) == {Modifier.AIM}
    assert Modifier.set_from_mask(0) == set()


def test_orientation():
    assert Orientation.lookup_value(-1) is Orientation.UNKNOWN
    assert repr(Orientation.LEFT) == "EnumItem(3, 'LEFT')"
    assert [str(o) for o in Orientation] == ['UNKNOWN', 'UP', 'RIGHT', 'DOWN', 'LEFT']


def test_resolve():
    assert resolve(SymbolType, 'qrcode') is SymbolType.QRCODE
    assert resolve(SymbolType, 13) is SymbolType.EAN13
    assert resolve(Config, Config.ENABLE) is Config.ENABLE
    assert not isinstance(resolve(Config, 99), EnumItem)
    with pytest.raises(AttributeError):
        resolve(SymbolType, 'nope')
