"""Configuration loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from calsettings.constants import DEFAULT_TIMEZONE

# Load environment variables from .env file(s)
load_dotenv()


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class PanelConfig(BaseModel):
    """Settings for running the daily summary panel outside a chat server.

    Graph credentials are optional; without them every user is given
    `default_timezone`.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/calsettings/config.yaml").expanduser(),
        Path("/etc/calsettings/config.yaml"),
    ]

    # Storage
    store_path: Path = Field(
        Path("settings.yaml"), description="YAML file holding every user's settings"
    )

    # Microsoft Graph
    graph_tenant_id: str | None = Field(None, description="Azure AD tenant id")
    graph_client_id: str | None = Field(None, description="Application (client) id")
    graph_client_secret: str | None = Field(None, description="Application client secret")
    graph_timeout: float = Field(10, gt=0, description="Graph request timeout (seconds)")
    default_timezone: str = Field(
        DEFAULT_TIMEZONE, min_length=1, description="Timezone used without Graph"
    )

    # Panel
    action_endpoint: str = Field(
        "/settings", description="URL the rendered controls post back to"
    )

    @property
    def has_graph_credentials(self) -> bool:
        """Whether all three Graph credentials are set."""
        return bool(self.graph_tenant_id and self.graph_client_id and self.graph_client_secret)

    @classmethod
    def load(cls, path: Path | None = None) -> PanelConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to config file (optional, searches default locations if None)

        Returns:
            Validated PanelConfig object

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the config file cannot be parsed or is invalid
        """
        if path is None:
            env_path = os.environ.get("CALSETTINGS_CONFIG")
            if env_path:
                path = Path(env_path)
                if not path.exists():
                    raise FileNotFoundError(f"Config file from CALSETTINGS_CONFIG not found: {path}")
            else:
                for default_path in cls.DEFAULT_CONFIG_PATHS:
                    if default_path.exists():
                        path = default_path
                        break
                else:
                    raise FileNotFoundError(
                        "No configuration file found. Create config.yaml or set CALSETTINGS_CONFIG."
                    )

        try:
            raw = _interpolate_env(path.read_text())
            data = yaml.safe_load(raw) or {}
        except Exception as exc:
            raise RuntimeError(f"Unable to read config YAML: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration:\n{err}") from err
