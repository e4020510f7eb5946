"""Shared test fixtures for dev-nerves.

Provides:
- quiet_console: rich Console writing to a buffer
- scripted_prompter: factory for ScriptedPrompter
- make_context: ArtifactContext factory with a fixed date
- generated_project: directory shaped like `mix nerves.new` output
- fake_bootstrapper: ProjectBootstrapper stand-in that creates that directory
- cli_runner: Click CliRunner
"""

import io
from datetime import date
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

from dev_nerves.bootstrap import ProjectBootstrapper
from dev_nerves.core.config import Configuration
from dev_nerves.core.settings import DevNervesSettings
from dev_nerves.templates.context import ArtifactContext
from dev_nerves.ui.prompter import ScriptedPrompter

TARGET_EXS = """import Config

config :nerves_ssh,
  authorized_keys: []
"""

NERVES_GITIGNORE = """# The directory Mix will write compiled artifacts to.
/_build/

# If you run "mix test --cover", coverage assets end up here.
/cover/

# The directory Mix downloads your dependencies sources to.
/deps/
"""


def write_nerves_skeleton(project_dir: Path) -> Path:
    """Lay out the files `mix nerves.new` would have created."""
    (project_dir / "config").mkdir(parents=True)
    (project_dir / "config" / "target.exs").write_text(TARGET_EXS)
    (project_dir / ".gitignore").write_text(NERVES_GITIGNORE)
    (project_dir / "mix.exs").write_text("defmodule MyRobot.MixProject do\nend\n")
    return project_dir


class FakeBootstrapper(ProjectBootstrapper):
    """Records calls and creates the project skeleton (or fails)."""

    def __init__(self, cwd: Path, returncode: int = 0):
        super().__init__(cwd=cwd)
        self.returncode = returncode
        self.calls = []

    def run(self, project_name, target, install_deps=False):
        self.calls.append((project_name, target, install_deps))
        if self.returncode == 0:
            write_nerves_skeleton(self.cwd / project_name)
        return self.returncode


@pytest.fixture
def quiet_console():
    """Console that writes to an in-memory buffer."""
    return Console(file=io.StringIO(), width=120, highlight=False)


@pytest.fixture
def scripted_prompter():
    """Factory: scripted_prompter("rpi4", True, ...)."""
    def factory(*answers):
        return ScriptedPrompter(answers)
    return factory


@pytest.fixture
def make_context():
    """Factory for ArtifactContext with a fixed generation date."""
    def factory(target="rpi4", ssid="", psk="", project_name="my_robot", settings=None):
        return ArtifactContext(
            project_name=project_name,
            configuration=Configuration(target=target, wifi_ssid=ssid, wifi_psk=psk),
            settings=settings or DevNervesSettings(),
            generated_on=date(2026, 1, 15),
        )
    return factory


@pytest.fixture
def generated_project(tmp_path):
    """A project directory as left behind by `mix nerves.new`."""
    return write_nerves_skeleton(tmp_path / "my_robot")


@pytest.fixture
def fake_bootstrapper(tmp_path):
    return FakeBootstrapper(tmp_path)


@pytest.fixture
def cli_runner():
    """Click CliRunner for testing CLI commands."""
    return CliRunner()
