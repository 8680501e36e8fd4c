"""Codec configuration shared by the encoder and decoder."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from hexstream.exceptions import ConfigurationError


class CodecConfig(BaseModel):
    """
    Immutable settings for one encode or decode session.

    Attributes:
        ignore_whitespace: Skip all ASCII whitespace when decoding. When off,
            only line-feed is skipped.
        wrap_width: Emit a line break after this many encoded bytes.
            0 disables wrapping.
        prefix: String written before every encoded byte.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    ignore_whitespace: bool = Field(default=False, description="Ignore all ASCII whitespace on decode")
    wrap_width: int = Field(default=0, ge=0, description="Bytes per line, 0 for no wrapping")
    prefix: str = Field(default="", description="Per-byte prefix on encode")

    @classmethod
    def create(cls, **values) -> "CodecConfig":
        """
        Build a configuration, reporting validation problems as ConfigurationError.

        Raises:
            ConfigurationError: If any value is out of range or has the wrong type
        """
        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid codec configuration: {e}") from e

    @property
    def wraps(self) -> bool:
        return self.wrap_width > 0
