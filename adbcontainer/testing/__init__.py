"""
Oracle ADB testing infrastructure.

Container lifecycle management for tests running against an Oracle
Autonomous Database provisioned through a docker container.
"""

from .adb_container import LifecycleState, LifecycleStateError, OracleADBContainer
from .docker_runtime import ContainerRuntimeError, DockerRuntime, StartupTimeout
from .provider import OracleADBContainerProvider

__all__ = [
    'OracleADBContainer',
    'OracleADBContainerProvider',
    'LifecycleState',
    'LifecycleStateError',
    'DockerRuntime',
    'ContainerRuntimeError',
    'StartupTimeout'
]
