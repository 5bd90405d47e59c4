import json
import logging
import re
from pathlib import Path
from typing import Any, Literal

from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource
from functools import lru_cache

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


def _to_snake(name: str) -> str:
    """``SpreadsheetKey`` → ``spreadsheet_key``; snake_case names pass through."""
    return re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name).lower()


class ConfigFileSettingsSource(PydanticBaseSettingsSource):
    """Reads overrides from the JSON file named by ``config_file``.

    Keys may be snake_case field names or the CamelCase names used by older
    deployments (``DataDir``, ``SpreadsheetKey`` ...). Unknown keys are
    ignored, and an unreadable file is logged and skipped. Values are
    validated with the rest of the settings.
    """

    def __init__(
        self,
        settings_cls: type[BaseSettings],
        *locators: PydanticBaseSettingsSource,
    ):
        super().__init__(settings_cls)
        # Sources consulted, in order, for the path of the file itself
        self._locators = locators

    def _config_path(self) -> Path | None:
        for source in self._locators:
            value = source().get("config_file")
            if value:
                return Path(value)
        return None

    def get_field_value(self, field: FieldInfo, field_name: str) -> tuple[Any, str, bool]:
        # Values come from the whole file at once in __call__.
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        path = self._config_path()
        if path is None:
            return {}
        try:
            overrides = json.loads(path.read_text("utf-8"))
        except (OSError, ValueError) as exc:
            _config_logger.warning("Could not load config file %s: %s", path, exc)
            return {}
        if not isinstance(overrides, dict):
            _config_logger.warning("Config file %s must contain a JSON object", path)
            return {}

        fields = self.settings_cls.model_fields
        values: dict[str, Any] = {}
        for raw_key, value in overrides.items():
            key = _to_snake(raw_key)
            if key != "config_file" and key in fields:
                values[key] = value
        return values


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Hoops API"
    app_version: str = "0.1.0"
    app_env: str = "development"

    # Listener
    port: int = 8080
    data_dir: str = "data"

    # Which backend persists records submitted over HTTP
    record_backend: Literal["filesystem", "spreadsheet"] = "filesystem"

    # Spreadsheet list feed
    spreadsheet_key: str = ""
    worksheet_index: int = 0
    spreadsheet_feeds_url: str = "https://spreadsheets.google.com/feeds"
    spreadsheet_timeout: float = 30.0
    oauth_token_cache_file: str = "oauth-token.json"

    # Notification email
    email_sending_email: str = ""
    email_sending_username: str = ""
    email_sending_password: str = ""
    email_sending_host: str = ""
    email_sending_port: int = 25
    notification_email: str = ""

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_http: str = "WARNING"          # httpx / httpcore, outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_pipeline: str = "INFO"         # submission pipeline

    # Optional JSON file layered over the environment
    config_file: str | None = None

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Layer ``config_file`` between explicit arguments and the environment."""
        config_file = ConfigFileSettingsSource(
            settings_cls, init_settings, env_settings, dotenv_settings
        )
        return init_settings, config_file, env_settings, dotenv_settings, file_secret_settings


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; reads .env once."""
    return Settings()
