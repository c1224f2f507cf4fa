"""Character code classification with a dense ASCII fast path."""

from __future__ import annotations

from typing import Dict

_DENSE_SIZE = 256


def _to_uint8(value: int) -> int:
    return int(value) & 0xFF


class CharacterClassifier:
    """Maps character codes to small integer classes.

    Codes ``0..255`` are stored in a fully initialised ``bytearray``; every
    other code lives in a sparse dict. Unknown codes map to the default.
    """

    def __init__(self, default_value: int) -> None:
        self._default_value = _to_uint8(default_value)
        self._ascii_map = bytearray([self._default_value]) * _DENSE_SIZE
        self._map: Dict[int, int] = {}

    @property
    def default_value(self) -> int:
        return self._default_value

    def set(self, char_code: int, value: int) -> None:
        value = _to_uint8(value)
        if 0 <= char_code < _DENSE_SIZE:
            self._ascii_map[char_code] = value
        else:
            self._map[char_code] = value

    def get(self, char_code: int) -> int:
        if 0 <= char_code < _DENSE_SIZE:
            return self._ascii_map[char_code]
        return self._map.get(char_code, self._default_value)

    def clear(self) -> None:
        self._ascii_map[:] = bytearray([self._default_value]) * _DENSE_SIZE
        self._map.clear()


class CharacterSet:
    """Set of character codes backed by a boolean classifier."""

    def __init__(self) -> None:
        self._actual = CharacterClassifier(0)

    @classmethod
    def from_chars(cls, chars: str) -> "CharacterSet":
        result = cls()
        for char in chars:
            result.add(ord(char))
        return result

    def add(self, char_code: int) -> None:
        self._actual.set(char_code, 1)

    def has(self, char_code: int) -> bool:
        return self._actual.get(char_code) == 1

    def __contains__(self, item: object) -> bool:
        if isinstance(item, str):
            return len(item) == 1 and self.has(ord(item))
        if isinstance(item, int):
            return self.has(item)
        return False

    def clear(self) -> None:
        self._actual.clear()


__all__ = ["CharacterClassifier", "CharacterSet"]
