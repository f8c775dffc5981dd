"""
Control word flags and the sticky latch
"""

import pytest

from host.control_word import ControlFlags, ControlWordLatch
from models.enums import ControlFlag


def test_ds_attached_and_enabled_only():
    flags = ControlFlags.from_word(0b100001)

    assert flags == ControlFlags(ds_attached=True, enabled=True)


@pytest.mark.parametrize("word", range(64))
def test_flags_are_bitwise_projections(word):
    flags = ControlFlags.from_word(word)

    assert flags.ds_attached == bool(word & 0b100000)
    assert flags.fms_attached == bool(word & 0b010000)
    assert flags.estop == bool(word & 0b001000)
    assert flags.test_mode == bool(word & 0b000100)
    assert flags.autonomous == bool(word & 0b000010)
    assert flags.enabled == bool(word & 0b000001)


def test_high_bits_are_ignored():
    assert ControlFlags.from_word(0b1000000) == ControlFlags()


def test_flag_enum_values():
    assert ControlFlag.DS_ATTACHED == 32
    assert ControlFlag.ENABLED == 1


def test_latch_keeps_last_nonzero_word():
    latch = ControlWordLatch()

    assert latch.update(0) == 0
    assert latch.update(0b110001) == 0b110001
    assert latch.update(0) == 0b110001
    assert latch.update(0b000011) == 0b000011
