"""Platform-independent BLE GATT client core: addresses, UUIDs, API types and event broadcasting."""

__version__ = "0.11.8"

__all__ = ["adapter_manager", "api", "bdaddr", "bleuuid"]