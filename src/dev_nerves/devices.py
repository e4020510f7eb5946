"""Supported Nerves target devices.

The registry is fixed at import time. Its order is the order devices are
offered in the selection menu.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


class UnknownDeviceError(KeyError):
    """Target code is not in the registry.

    Codes are validated before configuration is built, so seeing this past
    that point means a caller skipped validation.
    """
    pass


@dataclass(frozen=True)
class DeviceDescriptor:
    """A supported target device."""
    code: str
    display_name: str
    short_description: str
    # Curated wording for the getting-started guide (None = use fallback)
    guide_name: Optional[str] = None
    power_spec: Optional[str] = None

    @property
    def menu_label(self) -> str:
        return f"{self.display_name} - {self.short_description}"


DEFAULT_POWER_SPEC = "Check your device's power requirements"


DEVICES: Tuple[DeviceDescriptor, ...] = (
    DeviceDescriptor("rpi", "Raspberry Pi A+, B, B+", "BCM2835, 512MB RAM"),
    DeviceDescriptor(
        "rpi0",
        "Raspberry Pi Zero / Zero W",
        "BCM2835, 512MB RAM",
        guide_name="Raspberry Pi Zero / Zero W",
        power_spec="Minimum: 5V/1A (recommend 5V/2A)",
    ),
    DeviceDescriptor("rpi2", "Raspberry Pi 2", "BCM2836, 1GB RAM"),
    DeviceDescriptor("rpi3a", "Raspberry Pi 3A and Zero 2 W (32 bits)", "BCM2837, 512MB RAM"),
    DeviceDescriptor("rpi0_2", "Raspberry Pi 3A and Zero 2 W (64 bits)", "BCM2837, 512MB RAM"),
    DeviceDescriptor(
        "rpi3",
        "Raspberry Pi 3 B, B+",
        "BCM2837, 1GB RAM",
        guide_name="Raspberry Pi 3 Model B/B+",
        power_spec="Minimum: 5V/2.5A (recommend 5V/3A)",
    ),
    DeviceDescriptor(
        "rpi4",
        "Raspberry Pi 4",
        "BCM2711, 2-8GB RAM",
        guide_name="Raspberry Pi 4 Model B",
        power_spec="Minimum: 5V/3A (USB-C power supply)",
    ),
    DeviceDescriptor(
        "rpi5",
        "Raspberry Pi 5",
        "BCM2712, 4-8GB RAM",
        guide_name="Raspberry Pi 5",
        power_spec="Minimum: 5V/5A (USB-C power supply with PD)",
    ),
    DeviceDescriptor(
        "bbb",
        "BeagleBone Black/Green/Wireless, PocketBeagle",
        "AM335x, 512MB RAM",
        guide_name="BeagleBone Black",
        power_spec="Minimum: 5V/2A (barrel jack or USB)",
    ),
    DeviceDescriptor("x86_64", "Generic x86_64", "x86_64 architecture"),
    DeviceDescriptor("osd32mp1", "OSD32MP1", "STM32MP157, 512MB RAM"),
    DeviceDescriptor("grisp2", "GRiSP 2", "i.MX 6UL, 512MB RAM"),
    DeviceDescriptor("mangopi_mq_pro", "MangoPi MQ Pro", "Allwinner D1, 1GB RAM"),
)

_BY_CODE = {device.code: device for device in DEVICES}


def list_devices() -> Tuple[DeviceDescriptor, ...]:
    """All devices in menu order."""
    return DEVICES


def target_codes() -> Tuple[str, ...]:
    return tuple(device.code for device in DEVICES)


def find(code: Optional[str]) -> Optional[DeviceDescriptor]:
    """Return the device for ``code``, or None if it is not registered."""
    if code is None:
        return None
    return _BY_CODE.get(code)


def is_valid_target(code: Optional[str]) -> bool:
    return find(code) is not None


def lookup(code: str) -> DeviceDescriptor:
    """Return the device for ``code``.

    Raises:
        UnknownDeviceError: If ``code`` is not registered
    """
    device = find(code)
    if device is None:
        raise UnknownDeviceError(code)
    return device


def guide_device_name(code: str) -> str:
    """Device name as written in FIRST_DEVICE.md.

    Devices without a curated name fall back to the upper-cased code.
    """
    device = lookup(code)
    return device.guide_name or code.upper()


def guide_power_spec(code: str) -> str:
    device = lookup(code)
    return device.power_spec or DEFAULT_POWER_SPEC
