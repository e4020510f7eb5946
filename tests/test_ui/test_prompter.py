"""Tests for dev_nerves.ui.prompter."""

import io

import click
import pytest
from click.testing import CliRunner
from rich.console import Console

from dev_nerves.ui.prompter import ConsolePrompter, PrompterExhaustedError, ScriptedPrompter


class TestScriptedPrompter:
    """Tests for ScriptedPrompter."""

    def test_answers_in_order(self):
        prompter = ScriptedPrompter(["rpi4", "HomeNet", "secret"])
        assert prompter.select_one(["rpi3", "rpi4"]) == "rpi4"
        assert prompter.text_input("WiFi SSID") == "HomeNet"
        assert prompter.secret_input("WiFi Password") == "secret"
        assert prompter.remaining == 0

    def test_index_answer(self):
        prompter = ScriptedPrompter([1])
        assert prompter.select_one(["a", "b", "c"]) == "b"

    def test_bool_is_a_value_not_an_index(self):
        prompter = ScriptedPrompter([False])
        assert prompter.select_one([True, False]) is False

    def test_answer_not_offered(self):
        prompter = ScriptedPrompter(["rpi9"])
        with pytest.raises(ValueError):
            prompter.select_one(["rpi3", "rpi4"])

    def test_exhausted(self):
        prompter = ScriptedPrompter()
        with pytest.raises(PrompterExhaustedError):
            prompter.text_input("WiFi SSID")

    def test_records_calls(self):
        prompter = ScriptedPrompter(["x"])
        assert not prompter.called
        prompter.select_one(["x", "y"], label="Pick:")
        assert prompter.calls == [("select_one", "Pick:")]
        assert prompter.offered == [["x", "y"]]


def _run_with_input(func, text):
    """Run ``func`` inside a click command fed with ``text`` on stdin."""
    captured = {}

    @click.command()
    def cmd():
        captured["value"] = func()

    result = CliRunner().invoke(cmd, input=text)
    assert result.exit_code == 0, result.output
    return captured["value"], result.output


class TestConsolePrompter:
    """Tests for ConsolePrompter, driven through click's prompt."""

    @pytest.fixture
    def prompter(self):
        return ConsolePrompter(Console(file=io.StringIO(), width=120))

    def test_select_by_number(self, prompter):
        value, _ = _run_with_input(lambda: prompter.select_one(["a", "b", "c"]), "2\n")
        assert value == "b"

    def test_select_default_is_first(self, prompter):
        value, _ = _run_with_input(lambda: prompter.select_one(["a", "b"]), "\n")
        assert value == "a"

    def test_select_rejects_out_of_range(self, prompter):
        value, output = _run_with_input(lambda: prompter.select_one(["a", "b"]), "5\n2\n")
        assert value == "b"
        assert "not in the range" in output

    def test_select_renders_options(self, prompter):
        _run_with_input(
            lambda: prompter.select_one(["rpi4"], render=str.upper, label="Choose your device:"),
            "1\n",
        )
        shown = prompter.console.file.getvalue()
        assert "Choose your device:" in shown
        assert "1. RPI4" in shown

    def test_select_empty_options(self, prompter):
        with pytest.raises(ValueError):
            prompter.select_one([])

    def test_text_input(self, prompter):
        value, _ = _run_with_input(lambda: prompter.text_input("WiFi SSID"), "HomeNet\n")
        assert value == "HomeNet"

    def test_secret_input_not_echoed(self, prompter):
        value, output = _run_with_input(lambda: prompter.secret_input("WiFi Password"), "secret123\n")
        assert value == "secret123"
        assert "secret123" not in output

    def test_select_shows_brackets_literally(self, prompter):
        _run_with_input(
            lambda: prompter.select_one(["a"], render=lambda _: "Pi [64 bit]", label="[Pick]"),
            "1\n",
        )
        shown = prompter.console.file.getvalue()
        assert "[Pick]" in shown
        assert "1. Pi [64 bit]" in shown
