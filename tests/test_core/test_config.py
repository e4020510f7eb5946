"""Tests for dev_nerves.core.config module."""

import pytest

from dev_nerves import devices
from dev_nerves.core.config import (
    Configuration,
    gather_configuration,
    is_valid_project_name,
    resolve_install_deps,
    resolve_target,
    resolve_wifi,
    validate_project_name,
)
from dev_nerves.errors import InvalidInputError, InvalidProjectNameError, ProjectExistsError


class TestConfiguration:
    """Tests for the Configuration dataclass."""

    def test_defaults_are_unset(self):
        config = Configuration(target="rpi4")
        assert config.wifi_ssid == ""
        assert config.wifi_psk == ""
        assert not config.wifi_configured
        assert not config.has_wifi_credentials

    def test_ssid_only_is_configured_without_credentials(self):
        config = Configuration(target="rpi4", wifi_ssid="ssid1")
        assert config.wifi_configured
        assert not config.has_wifi_credentials

    def test_both_set(self):
        config = Configuration(target="rpi4", wifi_ssid="HomeNet", wifi_psk="secret123")
        assert config.wifi_configured
        assert config.has_wifi_credentials

    def test_immutable(self):
        config = Configuration(target="rpi4")
        with pytest.raises(AttributeError):
            config.target = "bbb"


class TestValidateProjectName:
    """Tests for validate_project_name()."""

    @pytest.mark.parametrize("name", ["my_robot", "a", "robot2", "r2_d2"])
    def test_valid_names(self, name, tmp_path):
        assert validate_project_name(name, tmp_path) == tmp_path / name

    @pytest.mark.parametrize("name", ["MyRobot", "2robot", "_robot", "my-robot", "my robot", ""])
    def test_invalid_names(self, name, tmp_path):
        assert not is_valid_project_name(name)
        with pytest.raises(InvalidProjectNameError):
            validate_project_name(name, tmp_path)

    def test_existing_directory(self, tmp_path):
        (tmp_path / "my_robot").mkdir()
        with pytest.raises(ProjectExistsError) as exc_info:
            validate_project_name("my_robot", tmp_path)
        assert "already exists" in str(exc_info.value)

    def test_existing_file_counts_too(self, tmp_path):
        (tmp_path / "my_robot").write_text("")
        with pytest.raises(ProjectExistsError):
            validate_project_name("my_robot", tmp_path)

    def test_errors_are_invalid_input(self, tmp_path):
        with pytest.raises(InvalidInputError):
            validate_project_name("Bad", tmp_path)

    def test_nothing_created(self, tmp_path):
        with pytest.raises(InvalidProjectNameError):
            validate_project_name("Bad", tmp_path)
        assert list(tmp_path.iterdir()) == []


class TestResolveTarget:
    """Tests for resolve_target()."""

    @pytest.mark.parametrize("code", devices.target_codes())
    def test_valid_explicit_target_skips_prompt(self, code, scripted_prompter, quiet_console):
        prompter = scripted_prompter()
        assert resolve_target(code, prompter, quiet_console) == code
        assert not prompter.called
        assert f"Target: {code}" in quiet_console.file.getvalue()

    @pytest.mark.parametrize("code", ["unknown_code", "RPI4", ""])
    def test_invalid_explicit_target_prompts(self, code, scripted_prompter, quiet_console):
        prompter = scripted_prompter("bbb")
        assert resolve_target(code, prompter, quiet_console) == "bbb"
        assert prompter.calls == [("select_one", "Choose your device:")]
        assert "Warning:" in quiet_console.file.getvalue()

    def test_missing_target_prompts_without_warning(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter("rpi0")
        assert resolve_target(None, prompter, quiet_console) == "rpi0"
        assert "Warning:" not in quiet_console.file.getvalue()

    def test_menu_offers_registry_in_order(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter(0)
        selected = resolve_target(None, prompter, quiet_console)
        assert prompter.offered == [list(devices.target_codes())]
        assert selected == "rpi"

    def test_prompted_result_is_registry_code(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter(-1)
        assert resolve_target("nope", prompter, quiet_console) in devices.target_codes()


class TestResolveWifi:
    """Tests for resolve_wifi()."""

    def test_ssid_only_does_not_prompt_for_psk(self, scripted_prompter, quiet_console):
        # Known quirk: a lone SSID is accepted with an empty password
        prompter = scripted_prompter()
        assert resolve_wifi("ssid1", None, prompter, quiet_console) == ("ssid1", "")
        assert not prompter.called
        assert "WiFi configured: ssid1" in quiet_console.file.getvalue()

    def test_psk_only_does_not_prompt_for_ssid(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter()
        assert resolve_wifi(None, "secret", prompter, quiet_console) == ("", "secret")
        assert not prompter.called
        assert "WiFi configured: none" in quiet_console.file.getvalue()

    def test_both_explicit(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter()
        assert resolve_wifi("HomeNet", "secret123", prompter, quiet_console) == ("HomeNet", "secret123")
        assert not prompter.called

    def test_explicit_empty_strings_count_as_present(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter()
        assert resolve_wifi("", "", prompter, quiet_console) == ("", "")
        assert not prompter.called

    def test_neither_declined(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter(False)
        assert resolve_wifi(None, None, prompter, quiet_console) == ("", "")
        assert prompter.calls == [("select_one", "Would you like to configure WiFi?")]
        assert "skipped" in quiet_console.file.getvalue()

    def test_neither_accepted(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter(True, "  HomeNet ", " secret123\n")
        assert resolve_wifi(None, None, prompter, quiet_console) == ("HomeNet", "secret123")
        assert [method for method, _ in prompter.calls] == [
            "select_one", "text_input", "secret_input",
        ]

    def test_secret_not_echoed(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter(True, "HomeNet", "secret123")
        resolve_wifi(None, None, prompter, quiet_console)
        output = quiet_console.file.getvalue()
        assert "HomeNet" in output
        assert "secret123" not in output


class TestResolveInstallDeps:
    """Tests for resolve_install_deps()."""

    def test_non_interactive_never_prompts(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter()
        assert resolve_install_deps(False, prompter, quiet_console) is False
        assert not prompter.called

    def test_interactive_default_is_skip(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter(0)
        assert resolve_install_deps(True, prompter, quiet_console) is False
        assert prompter.offered == [[False, True]]

    def test_interactive_install(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter(True)
        assert resolve_install_deps(True, prompter, quiet_console) is True


class TestGatherConfiguration:
    """Tests for gather_configuration()."""

    def test_all_explicit(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter()
        config = gather_configuration("rpi4", "HomeNet", "secret123", prompter, quiet_console)
        assert config == Configuration("rpi4", "HomeNet", "secret123")
        assert not prompter.called

    def test_unknown_target_falls_back_to_menu(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter("bbb")
        config = gather_configuration("unknown_code", "ssid1", None, prompter, quiet_console)
        assert config.target == "bbb"
        assert config.wifi_ssid == "ssid1"
        assert config.wifi_psk == ""

    def test_fully_interactive(self, scripted_prompter, quiet_console):
        prompter = scripted_prompter("rpi5", False)
        config = gather_configuration(None, None, None, prompter, quiet_console)
        assert config == Configuration("rpi5", "", "")
        assert prompter.remaining == 0
