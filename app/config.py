"""
Shop backend application settings.

Extends the base settings with usage-data specific configuration.
"""

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """Usage data service settings."""

    # ==========================================================================
    # Shop Identity
    # ==========================================================================
    APP_URL: str = "http://localhost:8000"
    APP_VERSION: str = "1.0.0"

    # ==========================================================================
    # Usage Data Gateway
    # ==========================================================================
    USAGE_DATA_GATEWAY_URL: str = "https://usage-data.example.com"
    USAGE_DATA_GATEWAY_TIMEOUT: float = 5.0
    USAGE_DATA_REPORTING_ENABLED: bool = True

    def get_gateway_url(self) -> str:
        """Gateway base URL without trailing slash."""
        return self.USAGE_DATA_GATEWAY_URL.rstrip("/")

    def collect_errors(self) -> list:
        errors = super().collect_errors()

        if self.USAGE_DATA_REPORTING_ENABLED and not self.USAGE_DATA_GATEWAY_URL:
            errors.append("USAGE_DATA_GATEWAY_URL is required when reporting is enabled")

        return errors


# Global settings instance
settings = Settings()
