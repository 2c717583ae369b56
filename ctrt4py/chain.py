from ctrt4py.config import InvalidFormat
from enum import Enum


class ChainID(Enum):
    MAIN_NET = 'M'
    TEST_NET = 'T'

    @classmethod
    def from_str(cls, s):
        try:
            return cls(s)
        except ValueError:
            raise InvalidFormat('Unknown chain id {!r}'.format(s))

    def to_byte(self):
        return self.value.encode('latin1')


__all__ = [
    "ChainID",
]
