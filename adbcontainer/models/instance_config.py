"""
Instance descriptor model.

The ADB container writes the connection details of the provisioned instance
to a JSON descriptor file mounted from the host temporary directory.
"""

from pathlib import Path
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class DescriptorReadError(Exception):
    """Raised when the instance descriptor file is missing or malformed."""
    pass


def descriptor_path(tmp_dir: Union[str, Path], database_name: str) -> Path:
    """Return the host path of the descriptor file for a database."""
    return Path(tmp_dir) / f"{database_name}.json"


class InstanceConfig(BaseModel):
    """
    Connection endpoint of a provisioned database instance.

    Attributes:
        connection_string: TNS connection string (JSON field connectionString)
        web_console_url: SQL Developer Web URL (JSON field sqlDevWebUrl)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra='ignore')

    connection_string: str = Field(alias='connectionString')
    web_console_url: str = Field(alias='sqlDevWebUrl')

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'InstanceConfig':
        """
        Load the descriptor written by the container.

        Raises:
            DescriptorReadError: If the file is missing, unreadable or malformed
        """
        try:
            content = Path(path).read_text(encoding='utf-8')
        except OSError as e:
            raise DescriptorReadError(f"Failed to read instance descriptor {path}: {e}") from e

        try:
            return cls.model_validate_json(content)
        except ValidationError as e:
            raise DescriptorReadError(f"Malformed instance descriptor {path}: {e}") from e
