"""Data models for the Oracle ADB container."""

from .image_name import DockerImageName
from .instance_config import InstanceConfig, DescriptorReadError, descriptor_path

__all__ = [
    'DockerImageName',
    'InstanceConfig',
    'DescriptorReadError',
    'descriptor_path'
]
