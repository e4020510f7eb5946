"""Project workspace templates.

- <name>.code-workspace and .vscode/settings.json for ElixirLS
- the WiFi block appended to config/target.exs
- the dev container block appended to .gitignore
"""

from typing import Optional

from dev_nerves.templates._text import escape_string
from dev_nerves.templates.context import ArtifactContext

# Presence of this line in .gitignore means the block was already merged
GITIGNORE_MARKER = ".ssh/*"

GITIGNORE_BLOCK = """
# Dev container
.ssh/*
!.ssh/.gitkeep

# Firmware images
*.img
*.fw
"""


def render_code_workspace(ctx: ArtifactContext) -> str:
    """Render <name>.code-workspace."""
    return """{
  "folders": [
    {
      "path": "."
    }
  ],
  "settings": {
    "elixirLS.projectDir": ".",
    "terminal.integrated.defaultProfile.linux": "bash"
  }
}
"""


def render_vscode_settings(ctx: ArtifactContext) -> str:
    """Render .vscode/settings.json."""
    return f"""{{
  "elixirLS.projectDir": "{ctx.project_name}"
}}
"""


def render_target_wifi(ctx: ArtifactContext) -> Optional[str]:
    """Render the vintage_net block for config/target.exs.

    Returns None unless both SSID and PSK are set. Environment variables
    from the dev container take precedence over the baked-in values.
    """
    config = ctx.configuration
    if not config.has_wifi_credentials:
        return None

    ssid = escape_string(config.wifi_ssid)
    psk = escape_string(config.wifi_psk)
    domain = escape_string(ctx.settings.regulatory_domain)

    return f"""
# WiFi Configuration
config :vintage_net,
  regulatory_domain: "{domain}",
  config: [
    {{"wlan0",
     %{{
       type: VintageNetWiFi,
       vintage_net_wifi: %{{
         networks: [
           %{{
             key_mgmt: :wpa_psk,
             ssid: System.get_env("WIFI_SSID") || "{ssid}",
             psk: System.get_env("WIFI_PSK") || "{psk}"
           }}
         ]
       }},
       ipv4: %{{method: :dhcp}}
     }}}},
    {{"eth0",
     %{{
       type: VintageNetEthernet,
       ipv4: %{{method: :dhcp}}
     }}}}
  ]
"""


def render_gitignore_block(ctx: ArtifactContext) -> str:
    return GITIGNORE_BLOCK
