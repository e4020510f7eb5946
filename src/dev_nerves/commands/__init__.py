"""CLI commands for dev-nerves."""
