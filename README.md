# btlecore

Platform-independent building blocks for Bluetooth Low Energy (BLE) GATT
clients, written for `asyncio` and using only the standard library. The
package provides value types, the abstract `Manager` / `Central` /
`Peripheral` interfaces and an in-memory peripheral registry with event
broadcasting.

## Installation

```
pip install btlecore
```

For development and tests:

```
pip install -e ".[test]"
pytest
```

## Bluetooth addresses (`btlecore.bdaddr`)

`BDAddr` is an immutable, hashable and ordered 6-byte address; byte 0 is the
most significant.

```python
from btlecore.bdaddr import BDAddr, IncorrectByteCountError, InvalidDigitError

addr = BDAddr.parse("00:11:22:33:44:55")   # or "001122334455"
print(addr)                                # 00:11:22:33:44:55 (upper case hex)
print(f"{addr:x}")                         # lower case, with colons
print(f"{addr:X}")                         # upper case, with colons
print(addr.to_string_no_delim())           # 001122334455
print(int(addr))                           # the address as an integer
print(BDAddr.from_int(int(addr)) == addr)  # True
print(bytes(addr) == addr.into_inner())    # True
print(addr.is_random_static())             # True if the two low bits of the last byte are set

try:
    BDAddr.parse("2A:00:00")
except IncorrectByteCountError:
    ...                                    # not six bytes
try:
    BDAddr.parse("2A:00:AA:BB:CC:ZZ")
except InvalidDigitError:
    ...                                    # not a hex byte
```

Addresses can also be built with `BDAddr(...)` or `BDAddr.from_bytes(...)`
from six byte values, and parsed strictly with `BDAddr.from_str_delim` or
`BDAddr.from_str_no_delim`. `BDAddr.from_int` accepts only values below
2**48. All parsing errors derive from `ParseBDAddrError`, itself a
`ValueError`.

Serialization helpers:

| Function | Output |
| --- | --- |
| `serialize_colon_delim` / `deserialize_colon_delim` | `"00:11:22:33:44:55"` |
| `serialize_no_delim` / `deserialize_no_delim` | `"001122334455"` |
| `serialize_bytes` / `deserialize_bytes` | `[0, 17, 34, 51, 68, 85]` |

The string deserializers raise `TypeError` for a value that is not a string.

## BLE UUIDs (`btlecore.bleuuid`)

```python
from uuid import UUID
from btlecore.bleuuid import uuid_from_u16, uuid_from_u32, to_ble_u16, to_ble_u32, to_short_string

u = uuid_from_u16(0x1122)     # UUID('00001122-0000-1000-8000-00805f9b34fb')
to_ble_u16(u)                 # 0x1122
to_short_string(u)            # "0x1122"
to_short_string(uuid_from_u32(0x11223344))                       # "0x11223344"
to_ble_u32(UUID("12345678-9000-1000-8000-00805f9b34fb"))        # None
```

`uuid_from_u16` and `uuid_from_u32` raise `ValueError` for values outside
their range. `to_short_string` falls back to the full UUID string.

## API types (`btlecore.api`)

- `AddressType` (`PUBLIC`, `RANDOM`) with `from_str`, `from_u8` and `num()`
  (1 for public, 2 for random).
- `CharPropFlags`, an `IntFlag` of characteristic properties (`READ`,
  `WRITE`, `NOTIFY`, ...).
- Frozen, ordered dataclasses `Descriptor`, `Characteristic` and `Service`.
  A characteristic's `descriptors` and a service's `characteristics` are
  stored as sorted tuples without duplicates.
- `PeripheralProperties` (note the field `class_`), `ScanFilter`,
  `WriteType`, `CentralState` and `ValueNotification`.
- Events derived from `CentralEvent`: `DeviceDiscovered`, `DeviceUpdated`,
  `DeviceConnected`, `DeviceDisconnected`, `ManufacturerDataAdvertisement`,
  `ServiceDataAdvertisement`, `ServicesAdvertisement` and `StateUpdate`.
- Abstract base classes `Peripheral`, `Central` and `Manager`.
  `Peripheral.characteristics()` is provided and returns every characteristic
  of every service as a sorted list.

## Adapter manager (`btlecore.adapter_manager`)

`AdapterManager` keeps the peripherals an adapter has seen and fans out
`CentralEvent`s to any number of subscribers:

```python
from btlecore.adapter_manager import AdapterManager
from btlecore.api import DeviceConnected

manager = AdapterManager()
events = manager.event_stream()       # sees events emitted from now on
manager.emit(DeviceConnected("dev-1"))

async for event in events:
    ...
```

- `add_peripheral` registers a peripheral under `peripheral.id()` and raises
  `ValueError` if that identifier is already known.
- `peripherals()` lists the known peripherals; `peripheral(id)` returns one
  or `None`.
- A `DeviceDisconnected` event also removes the peripheral from the registry.
- Events emitted while nobody is subscribed are dropped (and logged at debug
  level). A subscriber that falls behind by more than the capacity (16 by
  default) loses the oldest unread events.

`BroadcastChannel` is the underlying channel: `send(item)` delivers to every
live `BroadcastReceiver` and returns how many there were, and `subscribe()`
returns a receiver usable with `async for`.
`notifications_stream_from_broadcast_receiver` turns a receiver of
`ValueNotification`s into an async stream.

## What this package does not do

It contains no backend: nothing here talks to a Bluetooth adapter or to the
operating system, scans for devices or opens connections. `Manager`,
`Central` and `Peripheral` are abstract classes that a backend has to
implement, and there is no command-line program.