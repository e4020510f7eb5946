"""Running the upstream Nerves project generator.

``mix nerves.new`` creates the Elixir project that the dev container
files are added to. It asks one question ("Fetch and install
dependencies?"), which is answered on stdin.

``MIX_TARGET`` is passed in the child's environment only; the current
process environment is left untouched.
"""

import logging
import os
import subprocess
from pathlib import Path
from typing import Dict, Optional, Sequence

from dev_nerves.errors import BootstrapError

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = ("mix", "nerves.new")

# Shell convention for "command not found"
NOT_FOUND_EXIT_CODE = 127

INSTALL_HINT = "Make sure nerves_bootstrap is installed: mix archive.install hex nerves_bootstrap"


class ProjectBootstrapper:
    """Invokes ``mix nerves.new`` and reports its exit status."""

    def __init__(self, command: Sequence[str] = DEFAULT_COMMAND, cwd: Optional[Path] = None):
        self.command = list(command)
        self.cwd = cwd

    def build_command(self, project_name: str, target: str) -> list:
        return self.command + [project_name, "--target", target]

    def build_env(self, target: str) -> Dict[str, str]:
        """Child environment: the current one plus ``MIX_TARGET``."""
        env = dict(os.environ)
        env["MIX_TARGET"] = target
        return env

    def run(self, project_name: str, target: str, install_deps: bool = False) -> int:
        """Run the generator, streaming its output to the terminal.

        Args:
            project_name: Name of the project directory to create
            target: Nerves target code, exported as MIX_TARGET
            install_deps: Answer to the "install dependencies?" question

        Returns:
            Exit status of the generator (127 if it is not installed)
        """
        cmd = self.build_command(project_name, target)
        answer = "y\n" if install_deps else "n\n"
        logger.debug("Running %s (MIX_TARGET=%s)", " ".join(cmd), target)

        try:
            result = subprocess.run(
                cmd,
                cwd=self.cwd or Path.cwd(),
                env=self.build_env(target),
                input=answer,
                text=True,
                stderr=subprocess.STDOUT,
            )
        except FileNotFoundError:
            logger.debug("%s not found on PATH", cmd[0])
            return NOT_FOUND_EXIT_CODE

        logger.debug("%s exited with %d", " ".join(cmd), result.returncode)
        return result.returncode

    def ensure_project(self, project_name: str, target: str, install_deps: bool = False) -> None:
        """Run the generator and fail on a non-zero exit.

        Raises:
            BootstrapError: If the generator did not exit with 0
        """
        code = self.run(project_name, target, install_deps=install_deps)
        if code != 0:
            raise BootstrapError(
                f"Failed to create Nerves project (exit code: {code})\n{INSTALL_HINT}",
                returncode=code,
            )
