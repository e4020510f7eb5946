"""dev-nerves - Nerves projects with a VS Code dev container setup."""

__version__ = "0.1.0"
