"""Bluetooth device addresses (the 6-byte MAC address of a BLE device)."""

from __future__ import annotations

import functools
import string
from collections.abc import Iterable

_HEX_DIGITS = frozenset(string.hexdigits)
_ADDRESS_LEN = 6


class ParseBDAddrError(ValueError):
    """Raised when a Bluetooth address cannot be built from the given input."""


class IncorrectByteCountError(ParseBDAddrError):
    """The input does not describe exactly six bytes."""

    def __init__(self) -> None:
        super().__init__("Bluetooth address has to be 6 bytes long")


class InvalidDigitError(ParseBDAddrError):
    """A part of the input is not a valid hexadecimal byte."""

    def __init__(self, part: str) -> None:
        self.part = part
        super().__init__(f"Invalid digit in address: {part!r}")


def _parse_hex_byte(part: str) -> int:
    digits = part[1:] if part.startswith("+") else part
    if not digits or not all(ch in _HEX_DIGITS for ch in digits):
        raise InvalidDigitError(part)
    value = int(digits, 16)
    if value > 0xFF:
        raise InvalidDigitError(part)
    return value


@functools.total_ordering
class BDAddr:
    """An immutable 6-byte Bluetooth address; byte 0 is the most significant."""

    __slots__ = ("_address",)

    def __init__(self, address: Iterable[int] | bytes = bytes(_ADDRESS_LEN)) -> None:
        try:
            data = bytes(address)
        except (TypeError, ValueError) as exc:
            raise ParseBDAddrError(f"not a sequence of bytes: {address!r}") from exc
        if len(data) != _ADDRESS_LEN:
            raise IncorrectByteCountError()
        self._address = data

    @classmethod
    def from_bytes(cls, data: Iterable[int] | bytes) -> BDAddr:
        """Build an address from exactly six bytes."""
        return cls(data)

    @classmethod
    def from_int(cls, value: int) -> BDAddr:
        """Build an address from an integer whose upper 16 of 64 bits are zero."""
        if not 0 <= value < 1 << 48:
            raise IncorrectByteCountError()
        return cls(value.to_bytes(_ADDRESS_LEN, "big"))

    @classmethod
    def parse(cls, text: str) -> BDAddr:
        """Parse ``aa:bb:cc:dd:ee:ff`` or ``aabbccddeeff``."""
        if ":" in text:
            return cls.from_str_delim(text)
        return cls.from_str_no_delim(text)

    @classmethod
    def from_str_delim(cls, text: str) -> BDAddr:
        """Parse an address with colons as delimiters."""
        values = [_parse_hex_byte(part) for part in text.split(":")]
        if len(values) != _ADDRESS_LEN:
            raise IncorrectByteCountError()
        return cls(values)

    @classmethod
    def from_str_no_delim(cls, text: str) -> BDAddr:
        """Parse an address written as twelve hex digits without delimiters."""
        if len(text) != 2 * _ADDRESS_LEN:
            raise IncorrectByteCountError()
        return cls(_parse_hex_byte(text[i : i + 2]) for i in range(0, len(text), 2))

    def into_inner(self) -> bytes:
        """Return the six address bytes."""
        return self._address

    def is_random_static(self) -> bool:
        """Return True if the address is a random static address."""
        return self._address[5] & 0b11 == 0b11

    def to_string_no_delim(self) -> str:
        """Return the address as twelve lowercase hex digits."""
        return self._address.hex()

    def __int__(self) -> int:
        return int.from_bytes(self._address, "big")

    def __bytes__(self) -> bytes:
        return self._address

    def __str__(self) -> str:
        return self._address.hex(":").upper()

    def __repr__(self) -> str:
        return f"BDAddr('{self}')"

    def __format__(self, spec: str) -> str:
        if spec == "x":
            return self._address.hex(":")
        if spec == "X":
            return str(self)
        return format(str(self), spec)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BDAddr):
            return NotImplemented
        return self._address == other._address

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BDAddr):
            return NotImplemented
        return self._address < other._address

    def __hash__(self) -> int:
        return hash(self._address)


def serialize_colon_delim(addr: BDAddr) -> str:
    """Serialize as uppercase hex digits separated by colons."""
    return format(addr, "X")


def deserialize_colon_delim(value: object) -> BDAddr:
    """Deserialize a colon separated address string."""
    if not isinstance(value, str):
        raise TypeError(
            "expected a colon separated Bluetooth address, like `00:11:22:33:44:55`"
        )
    return BDAddr.from_str_delim(value)


def serialize_no_delim(addr: BDAddr) -> str:
    """Serialize as twelve lowercase hex digits."""
    return addr.to_string_no_delim()


def deserialize_no_delim(value: object) -> BDAddr:
    """Deserialize an address string without delimiters."""
    if not isinstance(value, str):
        raise TypeError(
            "expected a Bluetooth address without any delimiters, like `001122334455`"
        )
    return BDAddr.from_str_no_delim(value)


def serialize_bytes(addr: BDAddr) -> list[int]:
    """Serialize as a list of six byte values."""
    return list(addr.into_inner())


def deserialize_bytes(value: Iterable[int]) -> BDAddr:
    """Deserialize from a sequence of six byte values."""
    return BDAddr.from_bytes(value)