"""
OCI Credentials File Parser

Parses the sectioned key=value OCI configuration file (usually ~/.oci/config)
and resolves the private key file configured for a given profile.

Format:
    [ProfileName]
    key_file=/path/to/key
    other_key=value

Blank lines and lines starting with '#' are ignored.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_NAME = 'DEFAULT'
KEY_FILE_PROPERTY = 'key_file'


class CredentialsFileError(Exception):
    """Base class for credentials file errors."""
    pass


class MalformedConfig(CredentialsFileError):
    """Raised when a credentials file line cannot be parsed."""
    pass


class ProfileNotFound(CredentialsFileError):
    """Raised when the requested profile has no section in the file."""
    pass


class KeyFileNotFound(CredentialsFileError):
    """Raised when the requested profile has no key_file property."""
    pass


class CredentialsFileParser:
    """
    Accumulates credentials file lines into per-profile mappings.

    Lines are fed one at a time through accept(); repeated section headers
    reopen the existing section and later duplicate keys overwrite earlier ones.
    """

    def __init__(self):
        self.sections: Dict[str, Dict[str, str]] = {}
        self.found_default_profile = False
        self._current_profile: Optional[str] = None

    @classmethod
    def from_file(cls, path: Union[str, Path], encoding: str = 'utf-8') -> 'CredentialsFileParser':
        """
        Parse a credentials file from disk.

        Args:
            path: Path to the credentials file
            encoding: Character encoding of the file

        Returns:
            Parser holding the parsed sections

        Raises:
            OSError: If the file cannot be opened
            MalformedConfig: If a line is not valid
        """
        parser = cls()
        with open(path, 'r', encoding=encoding) as f:
            parser.parse_lines(f)
        logger.debug(f"Parsed credentials file {path}: profiles={sorted(parser.sections)}")
        return parser

    def parse_lines(self, lines: Iterable[str]) -> Dict[str, Dict[str, str]]:
        """Feed every line to the parser and return the sections."""
        for line in lines:
            self.accept(line)
        return self.sections

    def accept(self, line: str):
        """Parse a single line."""
        trimmed = line.strip()

        if not trimmed or trimmed.startswith('#'):
            return

        if trimmed.startswith('[') and trimmed.endswith(']'):
            profile = trimmed[1:-1].strip()
            if not profile:
                raise MalformedConfig(f"Cannot have empty profile name: {line.rstrip()}")
            if profile == DEFAULT_PROFILE_NAME:
                self.found_default_profile = True
            self.sections.setdefault(profile, {})
            self._current_profile = profile
            return

        if '=' not in trimmed:
            raise MalformedConfig(f"Found line with no key-value pair: {line.rstrip()}")

        key, value = trimmed.split('=', 1)
        key = key.strip()
        if not key:
            raise MalformedConfig(f"Found line with no key: {line.rstrip()}")

        if self._current_profile is None:
            raise MalformedConfig(
                f"Config parse error, no section specified before key-value pair: {line.rstrip()}"
            )

        self.sections[self._current_profile][key] = value.strip()

    def get_profile(self, profile: str) -> Dict[str, str]:
        """Return the mapping for a profile, raising ProfileNotFound if absent."""
        if profile not in self.sections:
            raise ProfileNotFound(f"No profile named {profile} exists in the configuration file")
        return self.sections[profile]

    def get_value(self, profile: str, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a property of a profile, or default when the key is missing."""
        return self.get_profile(profile).get(key, default)

    def get_key_file(self, profile: str) -> str:
        """Return the key_file property of a profile."""
        values = self.get_profile(profile)
        if KEY_FILE_PROPERTY not in values:
            raise KeyFileNotFound(
                f"No {KEY_FILE_PROPERTY} property found in configuration for profile named {profile}"
            )
        return values[KEY_FILE_PROPERTY]


def get_key_file_path(config_path: Union[str, Path], profile: str, encoding: str = 'utf-8') -> str:
    """Resolve the key_file of a profile straight from a credentials file."""
    return CredentialsFileParser.from_file(config_path, encoding=encoding).get_key_file(profile)
