"""
Deployment configuration for the GIN services.
"""

import os
from dataclasses import dataclass

from ginclient.exceptions import ConfigurationError


@dataclass(frozen=True)
class GinConfig:
    """
    Base URLs and OAuth client credentials of one GIN deployment.

    Only ``auth_url``, ``repo_url``, ``doi_url`` and ``client_id`` are used by
    the client itself. The remaining fields describe the deployment (DOI
    documentation, download locations, contact) for applications built on
    top of the client.
    """

    auth_url: str
    repo_url: str
    client_id: str
    doi_url: str = ""
    client_secret: str = ""
    doi_file: str = ""
    doi_example: str = ""
    doid_url: str = ""
    client_dl: str = ""
    contact_email: str = ""
    static_content: str = ""

    def __post_init__(self) -> None:
        for name in ("auth_url", "repo_url", "doi_url", "doid_url"):
            object.__setattr__(self, name, getattr(self, name).rstrip("/"))

    @classmethod
    def from_env(cls) -> "GinConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            GIN_AUTH_URL: Base URL of the auth service (required)
            GIN_REPO_URL: Base URL of the repository service (required)
            GIN_CLIENT_ID: OAuth client id (required)
            GIN_CLIENT_SECRET: OAuth client secret (optional)
            GIN_DOI_URL: DOI request endpoint (optional)

        Raises:
            ConfigurationError: If a required variable is missing
        """
        values = {}
        for name, var in (
            ("auth_url", "GIN_AUTH_URL"),
            ("repo_url", "GIN_REPO_URL"),
            ("client_id", "GIN_CLIENT_ID"),
        ):
            value = os.environ.get(var)
            if not value:
                raise ConfigurationError(f"{var} environment variable not set")
            values[name] = value

        return cls(
            **values,
            doi_url=os.environ.get("GIN_DOI_URL", ""),
            client_secret=os.environ.get("GIN_CLIENT_SECRET", ""),
        )
