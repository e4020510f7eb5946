"""Exceptions raised by dev-nerves.

Every error a command reports to the operator derives from
``DevNervesError``. Commands catch it, print the message and exit with
status 1. Nothing here is retried and nothing is cleaned up.
"""

from pathlib import Path
from typing import Optional


class DevNervesError(Exception):
    """Base exception for dev-nerves."""
    pass


# =============================================================================
# Invalid input
# =============================================================================

class InvalidInputError(DevNervesError):
    """Operator supplied input that cannot be used."""
    pass


class InvalidProjectNameError(InvalidInputError):
    """Project name does not match ``^[a-z][a-z0-9_]*$``."""

    def __init__(self, name: str):
        super().__init__(
            f"Invalid project name '{name}'.\n"
            "Project name must start with a lowercase letter, followed by "
            "lowercase letters, numbers, or underscores."
        )
        self.name = name


class ProjectExistsError(InvalidInputError):
    """Target directory for the new project already exists."""

    def __init__(self, name: str):
        super().__init__(f"Directory '{name}' already exists.")
        self.name = name


# =============================================================================
# External process failure
# =============================================================================

class ExternalProcessError(DevNervesError):
    """An external tool exited unsuccessfully."""

    def __init__(self, message: str, returncode: int):
        super().__init__(message)
        self.returncode = returncode


class BootstrapError(ExternalProcessError):
    """``mix nerves.new`` failed."""
    pass


# =============================================================================
# Filesystem failure
# =============================================================================

class FileSystemError(DevNervesError):
    """Creating, writing or appending to a path failed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path
