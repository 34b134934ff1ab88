"""
Container Settings

Handles Oracle ADB container defaults from environment variables.
"""

import os
import tempfile
from typing import Optional

DEFAULT_IMAGE = 'loiclefevre/oracle-adb:19.0.0'
DEFAULT_READY_TIMEOUT_SECONDS = 120
DEFAULT_CONNECT_TIMEOUT_SECONDS = 60
DEFAULT_SHUTDOWN_GRACE_SECONDS = 20
DEFAULT_OCI_CONFIG_FILE = '~/.oci/config'


class ConfigurationError(Exception):
    """Raised when the container cannot be configured from its inputs."""
    pass


class InvalidArgument(ValueError):
    """Raised when a caller-supplied container option is not valid."""
    pass


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"Invalid {name} value: {raw}")


class ContainerSettings:
    """Manages container configuration defaults."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        self.image = os.getenv('ADB_IMAGE', DEFAULT_IMAGE)
        self.ready_timeout_seconds = _int_from_env('ADB_READY_TIMEOUT_SECONDS', DEFAULT_READY_TIMEOUT_SECONDS)
        self.connect_timeout_seconds = _int_from_env('ADB_CONNECT_TIMEOUT_SECONDS', DEFAULT_CONNECT_TIMEOUT_SECONDS)
        self.shutdown_grace_seconds = _int_from_env('ADB_SHUTDOWN_GRACE_SECONDS', DEFAULT_SHUTDOWN_GRACE_SECONDS)
        self.tmp_dir = os.getenv('ADB_TMP_DIR') or tempfile.gettempdir()
        self.oci_config_file = os.path.expanduser(os.getenv('OCI_CONFIG_FILE', DEFAULT_OCI_CONFIG_FILE))
        self.public_ip: Optional[str] = os.getenv('ADB_PUBLIC_IP') or None

    def validate(self):
        """Validate the configuration."""
        if self.ready_timeout_seconds <= 0:
            raise ConfigurationError(f"Ready timeout must be positive: {self.ready_timeout_seconds}")

        if self.connect_timeout_seconds <= 0:
            raise ConfigurationError(f"Connect timeout must be positive: {self.connect_timeout_seconds}")

        if self.shutdown_grace_seconds < 0:
            raise ConfigurationError(f"Shutdown grace period cannot be negative: {self.shutdown_grace_seconds}")

        if not self.image:
            raise ConfigurationError("Image cannot be empty")
