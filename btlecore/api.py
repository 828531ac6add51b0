"""Types and abstract interfaces that make up the BLE central API."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import AsyncIterator, Hashable, Iterable
from dataclasses import dataclass, field
from uuid import UUID

from btlecore.bdaddr import BDAddr


class AddressType(enum.Enum):
    """Whether a device address is random or public."""

    RANDOM = "random"
    PUBLIC = "public"

    @classmethod
    def from_str(cls, value: str) -> AddressType | None:
        """Map ``"public"`` or ``"random"`` to a member, anything else to None."""
        return {"public": cls.PUBLIC, "random": cls.RANDOM}.get(value)

    @classmethod
    def from_u8(cls, value: int) -> AddressType | None:
        """Map 1 to PUBLIC and 2 to RANDOM, anything else to None."""
        return {1: cls.PUBLIC, 2: cls.RANDOM}.get(value)

    def num(self) -> int:
        """Return the numeric code of this address type."""
        return 1 if self is AddressType.PUBLIC else 2


@dataclass(frozen=True)
class ValueNotification:
    """A value change pushed by a peripheral for one characteristic."""

    uuid: UUID
    value: bytes


class CharPropFlags(enum.IntFlag):
    """Operations a characteristic supports."""

    BROADCAST = 0x01
    READ = 0x02
    WRITE_WITHOUT_RESPONSE = 0x04
    WRITE = 0x08
    NOTIFY = 0x10
    INDICATE = 0x20
    AUTHENTICATED_SIGNED_WRITES = 0x40
    EXTENDED_PROPERTIES = 0x80


def _flags_debug(flags: CharPropFlags) -> str:
    names = [member.name for member in CharPropFlags if member & flags]
    if not names:
        return f"CharPropFlags({int(flags):#x})"
    return f"CharPropFlags({' | '.join(names)})"


def _sorted_unique(items: Iterable) -> tuple:
    return tuple(sorted(set(items)))


@dataclass(frozen=True, order=True)
class Descriptor:
    """A descriptor attached to a characteristic."""

    uuid: UUID
    service_uuid: UUID
    characteristic_uuid: UUID

    def __str__(self) -> str:
        return f"uuid: {self.uuid}"


@dataclass(frozen=True, order=True)
class Characteristic:
    """A GATT characteristic; its descriptors are kept sorted and unique."""

    uuid: UUID
    service_uuid: UUID
    properties: CharPropFlags
    descriptors: tuple[Descriptor, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "properties", CharPropFlags(self.properties))
        object.__setattr__(self, "descriptors", _sorted_unique(self.descriptors))

    def __str__(self) -> str:
        return f"uuid: {self.uuid}, char properties: {_flags_debug(self.properties)}"


@dataclass(frozen=True, order=True)
class Service:
    """A GATT service; its characteristics are kept sorted and unique."""

    uuid: UUID
    primary: bool
    characteristics: tuple[Characteristic, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "characteristics", _sorted_unique(self.characteristics))


@dataclass
class PeripheralProperties:
    """What the advertising reports received so far say about a peripheral."""

    address: BDAddr = field(default_factory=BDAddr)
    address_type: AddressType | None = None
    local_name: str | None = None
    tx_power_level: int | None = None
    rssi: int | None = None
    manufacturer_data: dict[int, bytes] = field(default_factory=dict)
    service_data: dict[UUID, bytes] = field(default_factory=dict)
    services: list[UUID] = field(default_factory=list)
    class_: int | None = None


@dataclass
class ScanFilter:
    """Restricts a scan to devices offering at least one of the given services."""

    services: list[UUID] = field(default_factory=list)


class WriteType(enum.Enum):
    """Whether a write expects a response from the device."""

    WITH_RESPONSE = enum.auto()
    WITHOUT_RESPONSE = enum.auto()


class CentralState(enum.IntEnum):
    """Power state of a Bluetooth adapter."""

    UNKNOWN = 0
    POWERED_ON = 1
    POWERED_OFF = 2


class CentralEvent:
    """Base class of the events an adapter emits."""

    __slots__ = ()


@dataclass
class DeviceDiscovered(CentralEvent):
    id: Hashable


@dataclass
class DeviceUpdated(CentralEvent):
    id: Hashable


@dataclass
class DeviceConnected(CentralEvent):
    id: Hashable


@dataclass
class DeviceDisconnected(CentralEvent):
    id: Hashable


@dataclass
class ManufacturerDataAdvertisement(CentralEvent):
    """Manufacturer data was advertised by a device."""

    id: Hashable
    manufacturer_data: dict[int, bytes]


@dataclass
class ServiceDataAdvertisement(CentralEvent):
    """Service data was advertised by a device."""

    id: Hashable
    service_data: dict[UUID, bytes]


@dataclass
class ServicesAdvertisement(CentralEvent):
    """The advertised services of a device changed."""

    id: Hashable
    services: list[UUID]


@dataclass
class StateUpdate(CentralEvent):
    state: CentralState


class Peripheral(ABC):
    """A remote BLE device: its state and the operations it supports."""

    @abstractmethod
    def id(self) -> Hashable:
        """Return the unique identifier of the peripheral."""

    @abstractmethod
    def address(self) -> BDAddr:
        """Return the MAC address of the peripheral."""

    @abstractmethod
    async def properties(self) -> PeripheralProperties | None:
        """Return the properties known from advertising reports."""

    @abstractmethod
    def services(self) -> set[Service]:
        """Return the services discovered so far."""

    def characteristics(self) -> list[Characteristic]:
        """Return all characteristics of all services, sorted and unique."""
        return sorted(
            {char for service in self.services() for char in service.characteristics}
        )

    @abstractmethod
    async def is_connected(self) -> bool:
        """Return True if currently connected."""

    @abstractmethod
    async def connect(self) -> None:
        """Connect to the device."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Terminate the connection to the device."""

    @abstractmethod
    async def discover_services(self) -> None:
        """Discover all services and their characteristics."""

    @abstractmethod
    async def write(
        self, characteristic: Characteristic, data: bytes, write_type: WriteType
    ) -> None:
        """Write data to a characteristic."""

    @abstractmethod
    async def read(self, characteristic: Characteristic) -> bytes:
        """Read the value of a characteristic."""

    @abstractmethod
    async def subscribe(self, characteristic: Characteristic) -> None:
        """Enable notify or indicate for a characteristic."""

    @abstractmethod
    async def unsubscribe(self, characteristic: Characteristic) -> None:
        """Disable notify or indicate for a characteristic."""

    @abstractmethod
    async def notifications(self) -> AsyncIterator[ValueNotification]:
        """Return a stream of value notifications."""

    @abstractmethod
    async def write_descriptor(self, descriptor: Descriptor, data: bytes) -> None:
        """Write data to a descriptor."""

    @abstractmethod
    async def read_descriptor(self, descriptor: Descriptor) -> bytes:
        """Read the value of a descriptor."""


class Central(ABC):
    """A local adapter that scans for and connects to peripherals."""

    @abstractmethod
    async def events(self) -> AsyncIterator[CentralEvent]:
        """Return a stream of adapter events."""

    @abstractmethod
    async def start_scan(self, scan_filter: ScanFilter) -> None:
        """Start scanning for devices."""

    @abstractmethod
    async def stop_scan(self) -> None:
        """Stop scanning."""

    @abstractmethod
    async def peripherals(self) -> list[Peripheral]:
        """Return the peripherals discovered so far."""

    @abstractmethod
    async def peripheral(self, peripheral_id: Hashable) -> Peripheral:
        """Return a discovered peripheral by its identifier."""

    @abstractmethod
    async def add_peripheral(self, peripheral_id: Hashable) -> Peripheral:
        """Add a peripheral without a scan result."""

    @abstractmethod
    async def adapter_info(self) -> str:
        """Return a human-readable description of the adapter."""

    @abstractmethod
    async def adapter_state(self) -> CentralState:
        """Return the power state of the adapter."""


class Manager(ABC):
    """Entry point giving access to the system's Bluetooth adapters."""

    @abstractmethod
    async def adapters(self) -> list[Central]:
        """Return all Bluetooth adapters."""