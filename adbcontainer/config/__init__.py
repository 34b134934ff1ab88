"""Configuration package for the Oracle ADB container."""

from .credentials import (
    CredentialsFileParser,
    CredentialsFileError,
    MalformedConfig,
    ProfileNotFound,
    KeyFileNotFound,
    get_key_file_path
)
from .settings import ContainerSettings, ConfigurationError, InvalidArgument

__all__ = [
    'CredentialsFileParser',
    'CredentialsFileError',
    'MalformedConfig',
    'ProfileNotFound',
    'KeyFileNotFound',
    'get_key_file_path',
    'ContainerSettings',
    'ConfigurationError',
    'InvalidArgument'
]
