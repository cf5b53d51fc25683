"""
Settings for the wacloud WhatsApp Cloud API client.

Simple, reliable environment variable configuration. Credentials are optional
at import time so the pricing and webhook helpers work without them; call
``settings.require_credentials()`` before talking to the Graph API.
"""

import os
import tomllib
from pathlib import Path

from dotenv import load_dotenv

# Load .env file for local development - look in current working directory
load_dotenv(".env")

DEFAULT_API_VERSION = "v20.0"
DEFAULT_BASE_URL = "https://graph.facebook.com"


def _get_version_from_pyproject() -> str:
    """
    Read version from pyproject.toml file.

    Returns:
        Version string from pyproject.toml, or fallback version
    """
    current_path = Path(__file__)
    for parent in [current_path.parent, *current_path.parents]:
        pyproject_path = parent / "pyproject.toml"
        if pyproject_path.exists():
            try:
                with open(pyproject_path, "rb") as f:
                    pyproject_data = tomllib.load(f)
                    version = pyproject_data.get("project", {}).get("version")
                    if version:
                        return version
            except (OSError, tomllib.TOMLDecodeError):
                continue

    return "0.1.0"


class Settings:
    """Client settings with environment-based configuration."""

    def __init__(self):
        # ================================================================
        # Version
        # ================================================================
        self.version: str = _get_version_from_pyproject()

        # ================================================================
        # Environment & General Configuration
        # ================================================================
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")
        self.log_dir: str = os.getenv("LOG_DIR", "./logs")
        self.environment: str = os.getenv("ENVIRONMENT", "DEV")

        # ================================================================
        # Graph API Configuration
        # ================================================================
        self.api_version: str = os.getenv("API_VERSION", DEFAULT_API_VERSION)
        self.base_url: str = os.getenv("BASE_URL", DEFAULT_BASE_URL)

        # ================================================================
        # WhatsApp Configuration
        # ================================================================
        self.wp_access_token: str | None = os.getenv("WP_ACCESS_TOKEN")
        self.wp_phone_id: str | None = os.getenv("WP_PHONE_ID")
        self.wp_bid: str | None = os.getenv("WP_BID")

        # Expected token for the webhook verification handshake
        self.whatsapp_webhook_verify_token: str | None = os.getenv(
            "WHATSAPP_WEBHOOK_VERIFY_TOKEN"
        )

        # ================================================================
        # Pricing Configuration
        # ================================================================
        # Alternate rate card; the bundled table is used when unset
        self.pricing_table_path: str | None = os.getenv("PRICING_TABLE_PATH")

        self._validate_settings()

    def _validate_settings(self):
        """Validate settings values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR"]
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        self.log_level = self.log_level.upper()

        valid_environments = ["DEV", "PROD"]
        if self.environment.upper() not in valid_environments:
            self.environment = "DEV"
        self.environment = self.environment.upper()

        if not self.api_version.startswith("v"):
            self.api_version = f"v{self.api_version}"

    def require_credentials(self, *, business: bool = False) -> None:
        """Validate the WhatsApp credentials needed for Graph API calls.

        Args:
            business: Also require the WhatsApp Business Account ID (WP_BID),
                which template management needs.

        Raises:
            ValueError: If a required credential is missing
        """
        if not self.wp_access_token:
            raise ValueError("WP_ACCESS_TOKEN is required")
        if not self.wp_phone_id:
            raise ValueError("WP_PHONE_ID is required")
        if business and not self.wp_bid:
            raise ValueError("WP_BID is required")

    @property
    def has_business_account(self) -> bool:
        """Check if a WhatsApp Business Account ID is configured."""
        return bool(self.wp_bid)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "DEV"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "PROD"


# Global settings instance
settings = Settings()
