import logging
from pathlib import Path

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from deepcli.core.errors import ConfigurationError


DEEPSEEK_API_URL = "https://api.deepseek.com/v1/chat/completions"
DEEPSEEK_MODEL = "deepseek-chat"
DEFAULT_MAX_TOKENS = 2048
DEFAULT_TEMPERATURE = 0.7
ENV_FILE = ".env"

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    deepseek_api_key: str = ""
    deepcli_timeout: float = 300.0  # Seconds; 0 or less disables the timeout

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def request_timeout(self) -> float | None:
        """Timeout to hand to the HTTP client, None meaning wait forever"""
        if self.deepcli_timeout <= 0:
            return None
        return self.deepcli_timeout


def load_settings(env_file: str | Path | None = ENV_FILE) -> Settings:
    """
    Load settings from the process environment, pre-populated by `env_file`.
    A missing file falls back to the environment silently. Any other read
    failure is reported as a warning and the file is skipped. Values that
    do not validate raise ConfigurationError.
    """
    try:
        return _read_settings(env_file)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {_describe_validation_error(e)}") from e


def _read_settings(env_file: str | Path | None) -> Settings:
    if env_file is None:
        return Settings(_env_file=None)

    if not Path(env_file).is_file():
        logger.debug(f"File {env_file} not found, using system environment variables")
        return Settings(_env_file=None)

    try:
        return Settings(_env_file=env_file)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Warning: error loading {env_file}: {e}")
        return Settings(_env_file=None)


def _describe_validation_error(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in detail['loc']).upper()}: {detail['msg']}"
        for detail in error.errors()
    )


def require_api_key(settings: Settings) -> str:
    if not settings.deepseek_api_key:
        raise ConfigurationError(
            "DeepSeek API key is not configured. Set the DEEPSEEK_API_KEY environment "
            "variable or create a .env file containing the key."
        )
    return settings.deepseek_api_key
