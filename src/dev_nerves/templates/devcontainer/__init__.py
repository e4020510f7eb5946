"""Dev container templates.

Creates (under ``.devcontainer/``):
- devcontainer.json - VS Code dev container descriptor
- docker-compose.yml - single privileged service on the host network
- Dockerfile - Elixir image with the Nerves toolchain and fwup
"""

from dev_nerves.templates._text import escape_string
from dev_nerves.templates.context import ArtifactContext


def render_devcontainer_json(ctx: ArtifactContext) -> str:
    """Render devcontainer.json.

    ``WIFI_SSID``/``WIFI_PSK`` are only added to ``remoteEnv`` when both
    are set.
    """
    config = ctx.configuration
    user = ctx.settings.remote_user

    wifi_vars = ""
    if config.has_wifi_credentials:
        wifi_vars = (
            ",\n"
            f'    "WIFI_SSID": "{escape_string(config.wifi_ssid)}",\n'
            f'    "WIFI_PSK": "{escape_string(config.wifi_psk)}"'
        )

    return f"""{{
  "name": "Nerves Dev Container",
  "dockerComposeFile": "docker-compose.yml",
  "service": "devcontainer",
  "workspaceFolder": "/workspaces/${{localWorkspaceFolderBasename}}",
  "mounts": [
    "source=${{localWorkspaceFolder}}/.ssh,target=/home/{user}/.ssh,type=bind,consistency=cached"
  ],
  "customizations": {{
    "vscode": {{
      "extensions": [
        "JakeBecker.elixir-ls",
        "ms-azuretools.vscode-docker"
      ],
      "settings": {{
        "terminal.integrated.defaultProfile.linux": "bash"
      }}
    }}
  }},
  "remoteEnv": {{
    "MIX_TARGET": "{escape_string(config.target)}"{wifi_vars}
  }},
  "postCreateCommand": "ssh-keygen -t ed25519 -f ~/.ssh/id_ed25519 -N '' -q || true && mix local.hex --force && mix local.rebar --force",
  "remoteUser": "{user}"
}}
"""


def render_docker_compose(ctx: ArtifactContext) -> str:
    """Render docker-compose.yml."""
    return """version: '3.8'
services:
  devcontainer:
    build:
      context: .
      dockerfile: Dockerfile
    volumes:
      - ../..:/workspaces:cached
    network_mode: "host"
    command: sleep infinity
    privileged: true
"""


_DOCKERFILE = r"""FROM {image}

LABEL org.opencontainers.image.description="Elixir Nerves devcontainer for VSCode"
LABEL org.opencontainers.image.source=https://github.com/jestyUY/dev_nerves

# Avoid warnings by switching to noninteractive
ENV DEBIAN_FRONTEND=noninteractive

# Configure user
ARG USERNAME={user}
ARG USER_UID=1000
ARG USER_GID=$USER_UID

# Install dependencies for Nerves
RUN apt-get update \
    && apt-get -y install --no-install-recommends \
    apt-utils \
    dialog \
    tree \
    git \
    iproute2 \
    procps \
    lsb-release \
    ca-certificates \
    inotify-tools \
    sudo \
    # Nerves build dependencies
    build-essential \
    automake \
    autoconf \
    libmnl-dev \
    squashfs-tools \
    ssh-askpass \
    pkg-config \
    curl \
    wget \
    # Nerves system customization dependencies
    libssl-dev \
    libncurses5-dev \
    bc \
    m4 \
    unzip \
    cmake \
    rsync \
    cpio \
    libnl-3-dev \
    # Networking tools
    nmap \
    iputils-ping \
    # Clean up
    && apt-get autoremove -y \
    && apt-get clean -y \
    && rm -rf /var/lib/apt/lists/*

# Install fwup (https://github.com/fwup-home/fwup)
ENV FWUP_VERSION="{fwup_version}"
RUN wget https://github.com/fwup-home/fwup/releases/download/v${FWUP_VERSION}/fwup_${FWUP_VERSION}_amd64.deb && \
    apt-get update && \
    apt-get install -y ./fwup_${FWUP_VERSION}_amd64.deb && \
    rm ./fwup_${FWUP_VERSION}_amd64.deb && \
    rm -rf /var/lib/apt/lists/*

# Create non-root user
RUN groupadd --gid $USER_GID $USERNAME \
    && useradd -s /bin/bash --uid $USER_UID --gid $USER_GID -m $USERNAME \
    && echo $USERNAME ALL=\(root\) NOPASSWD:ALL > /etc/sudoers.d/$USERNAME \
    && chmod 0440 /etc/sudoers.d/$USERNAME

# Switch to non-root user
USER $USERNAME

# Install Hex, Rebar, and Nerves bootstrap
RUN mix local.hex --force \
    && mix local.rebar --force \
    && mix archive.install hex nerves_bootstrap --force \
    && mix archive.install hex phx_new --force

# Ensure proper ownership
RUN sudo chown -R $USERNAME:$USERNAME /home/$USERNAME/

# Switch back to dialog for any ad-hoc use of apt-get
ENV DEBIAN_FRONTEND=dialog
ENV HOME=/home/{user}

WORKDIR /workspaces
"""


def render_dockerfile(ctx: ArtifactContext) -> str:
    """Render the dev container Dockerfile."""
    settings = ctx.settings
    # ${...} shell references stay literal, so substitute by hand
    return (
        _DOCKERFILE
        .replace("{image}", settings.elixir_image)
        .replace("{fwup_version}", settings.fwup_version)
        .replace("{user}", settings.remote_user)
    )
