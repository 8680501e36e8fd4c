"""Environment defaults for the command line tool."""

from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from hexstream.core.config import CodecConfig
from hexstream.core.sources import DEFAULT_CHUNK_SIZE
from hexstream.exceptions import ConfigurationError


class HexStreamSettings(BaseSettings):
    """
    Defaults read from HEXSTREAM_* environment variables or a .env file.

    Command line flags take precedence over every value here.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEXSTREAM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ignore_whitespace: bool = False
    wrap_width: int = Field(default=0, ge=0)
    prefix: str = ""
    log_level: str = "WARNING"
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)

    def to_codec_config(
        self,
        ignore_whitespace: Optional[bool] = None,
        wrap_width: Optional[int] = None,
        prefix: Optional[str] = None,
    ) -> CodecConfig:
        """
        Merge command line overrides into a codec configuration.

        Arguments left as None fall back to the settings value.

        Raises:
            ConfigurationError: If the merged values are invalid
        """
        return CodecConfig.create(
            ignore_whitespace=self.ignore_whitespace if ignore_whitespace is None else ignore_whitespace,
            wrap_width=self.wrap_width if wrap_width is None else wrap_width,
            prefix=self.prefix if prefix is None else prefix,
        )


def load_settings(**overrides) -> HexStreamSettings:
    """
    Read settings from the environment.

    Raises:
        ConfigurationError: If an environment value is invalid
    """
    try:
        return HexStreamSettings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid HEXSTREAM_* setting: {e}") from e
