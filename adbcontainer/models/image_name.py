"""
Docker image reference model.
"""

from typing import Optional

from adbcontainer.config.settings import InvalidArgument

DEFAULT_TAG = 'latest'


class DockerImageName:
    """
    Docker image reference split into repository and tag.

    Attributes:
        repository: Image repository, including registry and namespace
        tag: Image tag
    """

    def __init__(self, repository: str, tag: Optional[str] = None):
        if not repository:
            raise InvalidArgument("Image repository cannot be empty")
        self.repository = repository
        self.tag = tag or DEFAULT_TAG

    @classmethod
    def parse(cls, reference: str) -> 'DockerImageName':
        """Parse a 'repository[:tag]' reference."""
        reference = reference.strip()
        # a colon before the last slash belongs to a registry port
        last_slash = reference.rfind('/')
        last_colon = reference.rfind(':')
        if last_colon > last_slash:
            return cls(reference[:last_colon], reference[last_colon + 1:])
        return cls(reference)

    @property
    def unversioned_part(self) -> str:
        return self.repository

    def with_tag(self, tag: str) -> 'DockerImageName':
        return DockerImageName(self.repository, tag)

    def is_compatible_with(self, other: 'DockerImageName') -> bool:
        return self.repository == other.repository

    def assert_compatible_with(self, other: 'DockerImageName'):
        """Raise InvalidArgument if the image is not a version of other."""
        if not self.is_compatible_with(other):
            raise InvalidArgument(f"Image {self} is not compatible with {other.repository}")

    def __eq__(self, other) -> bool:
        if not isinstance(other, DockerImageName):
            return NotImplemented
        return self.repository == other.repository and self.tag == other.tag

    def __hash__(self) -> int:
        return hash((self.repository, self.tag))

    def __str__(self) -> str:
        return f"{self.repository}:{self.tag}"

    def __repr__(self) -> str:
        return f"DockerImageName({str(self)!r})"
