"""
Management API client configuration.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from ..errors import MissingCredentialsError


@dataclass
class ClientConfig:
    """Configuration for the OpenVPN Cloud management API client."""

    # Account
    cloud_id: str | None = field(default_factory=lambda: os.getenv("OPENVPN_CLOUD_ID"))
    base_url: str | None = field(default_factory=lambda: os.getenv("OPENVPN_CLOUD_BASE_URL"))

    # OAuth client credentials
    client_id: str | None = field(default_factory=lambda: os.getenv("OPENVPN_CLIENT_ID"))
    client_secret: str | None = field(default_factory=lambda: os.getenv("OPENVPN_CLIENT_SECRET"))

    # Request settings
    timeout: float = 30.0
    token_refresh_margin: float = 60.0
    user_agent: str = "ovpn-cloud"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.token_refresh_margin < 0:
            raise ValueError("token_refresh_margin cannot be negative")

    def resolved_base_url(self) -> str:
        """Base URL of the API, derived from ``cloud_id`` unless set explicitly."""
        if self.base_url:
            return self.base_url.rstrip("/")
        if self.cloud_id:
            return f"https://{self.cloud_id}.api.openvpn.com"
        raise MissingCredentialsError(
            "Either base_url or cloud_id must be configured",
            env_var="OPENVPN_CLOUD_ID",
        )

    def require_credentials(self) -> tuple[str, str]:
        if not self.client_id:
            raise MissingCredentialsError("client_id is not set", env_var="OPENVPN_CLIENT_ID")
        if not self.client_secret:
            raise MissingCredentialsError("client_secret is not set", env_var="OPENVPN_CLIENT_SECRET")
        return self.client_id, self.client_secret


__all__ = ["ClientConfig"]
