"""Core modules for dev-nerves.

- config: resolving the run's Configuration
- files: writing artifacts to disk
- settings: optional settings file
"""

from dev_nerves.core.config import (
    Configuration,
    gather_configuration,
    resolve_install_deps,
    resolve_target,
    resolve_wifi,
    validate_project_name,
)
from dev_nerves.core.files import (
    append_file,
    append_if_absent,
    materialize,
    WriteMode,
    create_directory,
    write_file,
)
from dev_nerves.core.settings import DevNervesSettings, load_settings

__all__ = [
    # Config
    "Configuration",
    "gather_configuration",
    "resolve_install_deps",
    "resolve_target",
    "resolve_wifi",
    "validate_project_name",
    # Files
    "append_file",
    "append_if_absent",
    "materialize",
    "WriteMode",
    "create_directory",
    "write_file",
    # Settings
    "DevNervesSettings",
    "load_settings",
]
