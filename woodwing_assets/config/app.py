import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..middleware.logging import logger
from ..models.domain.profile import PROFILES, ApiProfile


class ClientConfig(BaseModel):
    """Client configuration."""

    app_env: str = Field(
        default="local", description="Application environment (local, dev or prod)"
    )
    url: str = Field(description="Base URL of the Assets server, e.g. https://assets.example.com/")
    username: str = Field(default="", description="API user name")
    password: str = Field(default="", description="API user password")
    timeout: float = Field(default=60.0, gt=0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify the server certificate")
    flavor: str = Field(
        default="assets",
        pattern="^(assets|elvis)$",
        description="Server flavor: WoodWing Assets or legacy Elvis",
    )

    @property
    def profile(self) -> ApiProfile:
        """Protocol profile of the configured server flavor."""
        return PROFILES[self.flavor]

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables.

        In 'local' mode (default), it first loads variables from a .env file.
        In 'dev' and 'prod' mode, it reads directly from environment variables.
        """

        app_env = os.getenv("APP_ENV", "local").lower()
        logger.debug("App environment", extra={"app_env": app_env})
        if app_env == "local":
            dotenv_path = Path(".env")
            load_dotenv(dotenv_path=dotenv_path, override=True)
            logger.debug("Loaded .env file", extra={"dotenv_path": str(dotenv_path)})
        elif app_env not in ["dev", "prod"]:
            raise ValueError(f"Invalid app environment: {app_env}")

        url = os.getenv("ASSETS_URL")
        if not url:
            raise ValueError("ASSETS_URL is not set")

        return cls(
            app_env=app_env,
            url=url,
            username=os.getenv("ASSETS_USERNAME", ""),
            password=os.getenv("ASSETS_PASSWORD", ""),
            timeout=float(os.getenv("ASSETS_TIMEOUT", "60")),
            verify_ssl=os.getenv("ASSETS_VERIFY_SSL", "true").lower() != "false",
            flavor=os.getenv("ASSETS_FLAVOR", "assets").lower(),
        )
