"""Templates module for dev-nerves scaffolding.

Every run materializes the same ordered list of artifacts. Content varies
with the configuration but no artifact is dropped from the list; a render
that returns None is simply a no-op for that run.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from rich.console import Console

from dev_nerves.core.files import WriteMode, create_directory, materialize, write_file
from dev_nerves.templates._text import escape_string
from dev_nerves.templates.context import ArtifactContext

Render = Callable[[ArtifactContext], Optional[str]]


@dataclass(frozen=True)
class ArtifactSpec:
    """One generated file."""
    name: str
    path: str  # relative to the project root
    render: Render
    mode: WriteMode = WriteMode.OVERWRITE
    marker: Optional[str] = None


def build_artifacts(project_name: str) -> List[ArtifactSpec]:
    """The ordered artifact list for a project."""
    from dev_nerves.templates.devcontainer import (
        render_devcontainer_json,
        render_docker_compose,
        render_dockerfile,
    )
    from dev_nerves.templates.workspace import (
        GITIGNORE_MARKER,
        render_code_workspace,
        render_gitignore_block,
        render_target_wifi,
        render_vscode_settings,
    )
    from dev_nerves.templates.guide import render_first_device_guide

    return [
        ArtifactSpec("devcontainer.json", ".devcontainer/devcontainer.json", render_devcontainer_json),
        ArtifactSpec("docker-compose.yml", ".devcontainer/docker-compose.yml", render_docker_compose),
        ArtifactSpec("Dockerfile", ".devcontainer/Dockerfile", render_dockerfile),
        ArtifactSpec("VS Code workspace", f"{project_name}.code-workspace", render_code_workspace),
        ArtifactSpec("VS Code settings", ".vscode/settings.json", render_vscode_settings),
        ArtifactSpec("WiFi configuration", "config/target.exs", render_target_wifi, WriteMode.APPEND),
        ArtifactSpec("Getting started guide", "FIRST_DEVICE.md", render_first_device_guide),
        ArtifactSpec(
            ".gitignore updates",
            ".gitignore",
            render_gitignore_block,
            WriteMode.APPEND_IF_ABSENT,
            marker=GITIGNORE_MARKER,
        ),
    ]


def _create_base_structure(project_dir: Path) -> None:
    """Create .devcontainer/ and the .ssh/ mount point."""
    create_directory(project_dir / ".devcontainer")
    ssh_dir = project_dir / ".ssh"
    create_directory(ssh_dir)
    write_file(ssh_dir / ".gitkeep", "")


def scaffold_devcontainer(
    project_dir: Path,
    ctx: ArtifactContext,
    console: Optional[Console] = None,
) -> List[str]:
    """Add the dev container setup to a freshly generated project.

    Artifacts are written in order; the first failure propagates and
    anything already written stays on disk.

    Returns:
        Names of the artifacts that changed the filesystem
    """
    _create_base_structure(project_dir)

    written = []
    for spec in build_artifacts(ctx.project_name):
        content = spec.render(ctx)
        changed = False
        if content is not None:
            changed = materialize(project_dir / spec.path, content, spec.mode, spec.marker)
        if changed:
            written.append(spec.name)
        if console is not None:
            console.print(f"  [ok]✓[/] {spec.name}")

    return written


__all__ = [
    "ArtifactContext",
    "ArtifactSpec",
    "build_artifacts",
    "escape_string",
    "scaffold_devcontainer",
]
