"""Driver-station control word decoding"""

from dataclasses import dataclass

from models.enums import ControlFlag


@dataclass(frozen=True)
class ControlFlags:
    """Each flag is (word & bit) != 0, nothing else"""
    ds_attached: bool = False
    fms_attached: bool = False
    estop: bool = False
    test_mode: bool = False
    autonomous: bool = False
    enabled: bool = False

    @classmethod
    def from_word(cls, word: int) -> "ControlFlags":
        return cls(
            ds_attached=(word & ControlFlag.DS_ATTACHED) != 0,
            fms_attached=(word & ControlFlag.FMS_ATTACHED) != 0,
            estop=(word & ControlFlag.ESTOP) != 0,
            test_mode=(word & ControlFlag.TEST_MODE) != 0,
            autonomous=(word & ControlFlag.AUTONOMOUS) != 0,
            enabled=(word & ControlFlag.ENABLED) != 0,
        )


class ControlWordLatch:
    """Remembers the last non-zero control word; a zero sample never overwrites it"""

    def __init__(self, initial: int = 0):
        self.last_nonzero = initial

    def update(self, word: int) -> int:
        if word != 0:
            self.last_nonzero = word
        return self.last_nonzero
