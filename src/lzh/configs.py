from __future__ import annotations

"""Runtime settings for the handle helpers.

Values are read from ``LZH_*`` environment variables the first time
:func:`get_settings` is called and can be adjusted at runtime through
:meth:`HandleSettings.configure`.
"""

import codecs
import typing as t

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "HandleSettings",
    "get_settings",
    "reset_settings",
]


class HandleSettings(BaseSettings):
    """
    Settings shared by the line, interact and buffer helpers
    """

    buffer_encoding: str = 'latin-1' # one byte per character
    newline: str = '\n'
    debug_enabled: bool = False
    log_level: str = 'INFO'

    model_config = SettingsConfigDict(
        env_prefix = "LZH_",
        case_sensitive = False,
        extra = 'allow',
        populate_by_name = True,
        validate_assignment = True,
    )

    @field_validator('buffer_encoding')
    @classmethod
    def validate_buffer_encoding(cls, v: str) -> str:
        """
        Normalizes the encoding name, rejecting unknown codecs
        """
        try:
            return codecs.lookup(v).name
        except LookupError as e:
            raise ValueError(f'Unknown encoding: {v}') from e

    @field_validator('newline')
    @classmethod
    def validate_newline(cls, v: str) -> str:
        """
        Ensures the newline is not empty
        """
        if not v: raise ValueError('newline must not be empty')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Uppercases the log level
        """
        return v.upper()

    @property
    def newline_bytes(self) -> bytes:
        """
        Returns the newline encoded with the buffer encoding
        """
        return self.newline.encode(self.buffer_encoding)

    def configure(self, **kwargs: t.Any) -> None:
        """
        Updates the settings in place, validating each value
        """
        for key, value in kwargs.items():
            if key not in type(self).model_fields:
                raise AttributeError(f'Unknown setting: {key}')
            setattr(self, key, value)


_handle_settings: t.Optional[HandleSettings] = None


def get_settings(**kwargs: t.Any) -> HandleSettings:
    """
    Returns the Handle Settings
    """
    global _handle_settings
    if _handle_settings is None:
        _handle_settings = HandleSettings()
    if kwargs: _handle_settings.configure(**kwargs)
    return _handle_settings


def reset_settings() -> None:
    """
    Drops the cached settings so the next access re-reads the environment
    """
    global _handle_settings
    _handle_settings = None
