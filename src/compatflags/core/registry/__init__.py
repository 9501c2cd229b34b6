from compatflags.core.registry.abc import Registry
from compatflags.core.registry.types import RegistryValue, RegistryWriteError

__all__ = ["Registry", "RegistryValue", "RegistryWriteError"]
