"""Tests for dev_nerves.devices."""

import pytest

from dev_nerves import devices
from dev_nerves.devices import (
    DEFAULT_POWER_SPEC,
    DeviceDescriptor,
    UnknownDeviceError,
)


class TestRegistry:
    """Tests for the device catalog."""

    def test_menu_order(self):
        assert devices.target_codes() == (
            "rpi", "rpi0", "rpi2", "rpi3a", "rpi0_2", "rpi3", "rpi4",
            "rpi5", "bbb", "x86_64", "osd32mp1", "grisp2", "mangopi_mq_pro",
        )

    def test_codes_are_unique(self):
        codes = devices.target_codes()
        assert len(codes) == len(set(codes))

    def test_list_is_restartable(self):
        assert list(devices.list_devices()) == list(devices.list_devices())

    def test_descriptors_are_immutable(self):
        device = devices.lookup("rpi4")
        with pytest.raises(AttributeError):
            device.code = "rpi5"

    def test_menu_label(self):
        assert devices.lookup("bbb").menu_label == (
            "BeagleBone Black/Green/Wireless, PocketBeagle - AM335x, 512MB RAM"
        )


class TestLookup:
    """Tests for lookup(), find() and is_valid_target()."""

    def test_lookup_known(self):
        device = devices.lookup("rpi4")
        assert isinstance(device, DeviceDescriptor)
        assert device.display_name == "Raspberry Pi 4"

    def test_lookup_unknown_raises(self):
        with pytest.raises(UnknownDeviceError):
            devices.lookup("unknown_code")

    def test_unknown_device_error_is_key_error(self):
        with pytest.raises(KeyError):
            devices.lookup("esp32")

    def test_find_returns_none(self):
        assert devices.find("unknown_code") is None
        assert devices.find(None) is None

    @pytest.mark.parametrize("code", devices.target_codes())
    def test_every_code_is_valid(self, code):
        assert devices.is_valid_target(code)

    @pytest.mark.parametrize("code", ["", "RPI4", "rpi 4", "unknown_code"])
    def test_invalid_codes(self, code):
        assert not devices.is_valid_target(code)


class TestGuideMetadata:
    """Tests for the curated guide wording."""

    def test_curated_name(self):
        assert devices.guide_device_name("rpi3") == "Raspberry Pi 3 Model B/B+"
        assert devices.guide_device_name("bbb") == "BeagleBone Black"

    def test_fallback_name_is_upper_cased_code(self):
        assert devices.guide_device_name("grisp2") == "GRISP2"
        assert devices.guide_device_name("x86_64") == "X86_64"

    def test_curated_power_spec(self):
        assert devices.guide_power_spec("rpi4") == "Minimum: 5V/3A (USB-C power supply)"

    def test_fallback_power_spec(self):
        assert devices.guide_power_spec("rpi2") == DEFAULT_POWER_SPEC

    def test_curated_entries(self):
        curated = [d.code for d in devices.list_devices() if d.guide_name]
        assert curated == ["rpi0", "rpi3", "rpi4", "rpi5", "bbb"]
