from uuid import UUID

import pytest

from btlecore.api import (
    AddressType,
    CentralState,
    Characteristic,
    CharPropFlags,
    DeviceConnected,
    DeviceDiscovered,
    Descriptor,
    ManufacturerDataAdvertisement,
    Peripheral,
    PeripheralProperties,
    ScanFilter,
    Service,
    StateUpdate,
)
from btlecore.bdaddr import BDAddr
from btlecore.bleuuid import uuid_from_u16

SVC = uuid_from_u16(0x180D)
C1 = uuid_from_u16(0x2A37)
C2 = uuid_from_u16(0x2A38)
D1 = uuid_from_u16(0x2902)
D2 = uuid_from_u16(0x2901)


class _FakePeripheral(Peripheral):
    def __init__(self, services):
        self._services = set(services)

    def id(self):
        return "fake"

    def address(self):
        return BDAddr()

    async def properties(self):
        return None

    def services(self):
        return self._services

    async def is_connected(self):
        return False

    async def connect(self):
        pass

    async def disconnect(self):
        pass

    async def discover_services(self):
        pass

    async def write(self, characteristic, data, write_type):
        pass

    async def read(self, characteristic):
        return b""

    async def subscribe(self, characteristic):
        pass

    async def unsubscribe(self, characteristic):
        pass

    async def notifications(self):
        return None

    async def write_descriptor(self, descriptor, data):
        pass

    async def read_descriptor(self, descriptor):
        return b""


def test_address_type_from_str():
    assert AddressType.from_str("public") is AddressType.PUBLIC
    assert AddressType.from_str("random") is AddressType.RANDOM
    assert AddressType.from_str("other") is None


def test_address_type_u8_round_trip():
    assert AddressType.from_u8(1) is AddressType.PUBLIC
    assert AddressType.from_u8(2) is AddressType.RANDOM
    assert AddressType.from_u8(0) is None
    for member in AddressType:
        assert AddressType.from_u8(member.num()) is member


def test_char_prop_flag_values():
    assert CharPropFlags(0x10) is CharPropFlags.NOTIFY
    assert CharPropFlags(0x80) is CharPropFlags.EXTENDED_PROPERTIES
    combined = CharPropFlags(0x12)
    assert combined == CharPropFlags.READ | CharPropFlags.NOTIFY
    assert CharPropFlags.NOTIFY in combined
    assert CharPropFlags.WRITE not in combined


def test_characteristic_str():
    char = Characteristic(
        uuid_from_u16(0xFFE9), SVC, CharPropFlags.READ | CharPropFlags.NOTIFY
    )
    assert str(char) == (
        "uuid: 0000ffe9-0000-1000-8000-00805f9b34fb, "
        "char properties: CharPropFlags(READ | NOTIFY)"
    )


def test_characteristic_str_empty_flags():
    char = Characteristic(C1, SVC, CharPropFlags(0))
    assert str(char).endswith("char properties: CharPropFlags(0x0)")


def test_descriptor_str():
    assert str(Descriptor(D1, SVC, C1)) == f"uuid: {D1}"


def test_characteristic_descriptors_sorted_and_unique():
    d1 = Descriptor(D1, SVC, C1)
    d2 = Descriptor(D2, SVC, C1)
    char = Characteristic(C1, SVC, CharPropFlags.READ, [d1, d2, d1])
    assert char.descriptors == tuple(sorted([d1, d2]))
    assert len(char.descriptors) == 2


def test_service_characteristics_sorted_and_unique():
    a = Characteristic(C1, SVC, CharPropFlags.READ)
    b = Characteristic(C2, SVC, CharPropFlags.READ)
    svc = Service(SVC, True, [b, a, b])
    assert svc.characteristics == (a, b)


def test_ordering_follows_uuid():
    low = Descriptor(UUID(int=1), SVC, C1)
    high = Descriptor(UUID(int=2), SVC, C1)
    assert low < high
    assert sorted([high, low]) == [low, high]


def test_peripheral_characteristics_union():
    a = Characteristic(C1, SVC, CharPropFlags.READ)
    b = Characteristic(C2, SVC, CharPropFlags.WRITE)
    other = Characteristic(C1, uuid_from_u16(0x180F), CharPropFlags.READ)
    p = _FakePeripheral(
        [Service(SVC, True, [a, b]), Service(uuid_from_u16(0x180F), False, [other])]
    )
    result = p.characteristics()
    assert result == sorted([a, b, other])
    assert len(result) == 3


def test_peripheral_characteristics_empty():
    empty_service = Service(SVC, True, [])
    assert empty_service.characteristics == ()
    assert _FakePeripheral([empty_service]).characteristics() == []


def test_peripheral_is_abstract():
    with pytest.raises(TypeError):
        Peripheral()


def test_peripheral_properties_defaults():
    first = PeripheralProperties()
    second = PeripheralProperties()
    assert first.address == BDAddr(bytes(6))
    assert first.local_name is None
    first.manufacturer_data[1] = b"\x01"
    assert second.manufacturer_data == {}


def test_scan_filter_default_empty():
    assert ScanFilter().services == []
    assert ScanFilter() == ScanFilter([])


def test_central_state_values():
    assert CentralState(0) is CentralState.UNKNOWN
    assert CentralState(1) is CentralState.POWERED_ON
    assert CentralState(2) is CentralState.POWERED_OFF
    with pytest.raises(ValueError):
        CentralState(3)


def test_events_compare_by_value():
    assert DeviceDiscovered("x") == DeviceDiscovered("x")
    assert DeviceDiscovered("x") != DeviceConnected("x")
    event = ManufacturerDataAdvertisement("x", {76: b"\x02"})
    assert event.manufacturer_data == {76: b"\x02"}
    assert StateUpdate(CentralState.POWERED_ON).state is CentralState.POWERED_ON