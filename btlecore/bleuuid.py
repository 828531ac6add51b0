"""Conversions between full UUIDs and the short 16- and 32-bit BLE forms."""

from __future__ import annotations

from uuid import UUID

_BLUETOOTH_BASE_UUID = 0x00000000_0000_1000_8000_00805F9B34FB
_BLUETOOTH_BASE_MASK = 0x00000000_FFFF_FFFF_FFFF_FFFFFFFFFFFF
_BLUETOOTH_BASE_MASK_16 = 0xFFFF0000_FFFF_FFFF_FFFF_FFFFFFFFFFFF


def uuid_from_u32(short: int) -> UUID:
    """Expand a 32-bit short UUID using the Bluetooth Base UUID."""
    if not 0 <= short <= 0xFFFF_FFFF:
        raise ValueError(f"short UUID out of 32-bit range: {short:#x}")
    return UUID(int=_BLUETOOTH_BASE_UUID | (short << 96))


def uuid_from_u16(short: int) -> UUID:
    """Expand a 16-bit short UUID using the Bluetooth Base UUID."""
    if not 0 <= short <= 0xFFFF:
        raise ValueError(f"short UUID out of 16-bit range: {short:#x}")
    return uuid_from_u32(short)


def to_ble_u32(uuid: UUID) -> int | None:
    """Return the 32-bit short form, or None if the UUID has none."""
    value = uuid.int
    if value & _BLUETOOTH_BASE_MASK == _BLUETOOTH_BASE_UUID:
        return value >> 96
    return None


def to_ble_u16(uuid: UUID) -> int | None:
    """Return the 16-bit short form, or None if the UUID has none."""
    value = uuid.int
    if value & _BLUETOOTH_BASE_MASK_16 == _BLUETOOTH_BASE_UUID:
        return (value >> 96) & 0xFFFF
    return None


def to_short_string(uuid: UUID) -> str:
    """Format the UUID, using the short hex form where one exists."""
    short16 = to_ble_u16(uuid)
    if short16 is not None:
        return f"{short16:#04x}"
    short32 = to_ble_u32(uuid)
    if short32 is not None:
        return f"{short32:#06x}"
    return str(uuid)