"""
adbcontainer

Ephemeral Oracle Autonomous Database instances for automated tests: container
lifecycle, per-test-run database users and connection details.
"""

from adbcontainer.config import (
    ConfigurationError,
    ContainerSettings,
    CredentialsFileParser,
    InvalidArgument,
    KeyFileNotFound,
    MalformedConfig,
    ProfileNotFound
)
from adbcontainer.identity import IdentityAllocator, SequenceCounter
from adbcontainer.models import DescriptorReadError, DockerImageName, InstanceConfig
from adbcontainer.testing import (
    ContainerRuntimeError,
    LifecycleState,
    LifecycleStateError,
    OracleADBContainer,
    OracleADBContainerProvider,
    StartupTimeout
)

__version__ = "0.1.0"

__all__ = [
    'OracleADBContainer',
    'OracleADBContainerProvider',
    'LifecycleState',
    'LifecycleStateError',
    'ContainerSettings',
    'CredentialsFileParser',
    'IdentityAllocator',
    'SequenceCounter',
    'InstanceConfig',
    'DockerImageName',
    'ConfigurationError',
    'InvalidArgument',
    'MalformedConfig',
    'ProfileNotFound',
    'KeyFileNotFound',
    'DescriptorReadError',
    'ContainerRuntimeError',
    'StartupTimeout'
]
