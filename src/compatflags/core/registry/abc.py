"""Registry operations interface.

Architecture:
- Registry: Abstract base class defining the interface
- RealRegistry: Production implementation shelling out to reg.exe
- FakeRegistry: In-memory implementation for tests
- DryRunRegistry: Delegates reads, reports mutations without executing them
"""

from abc import ABC, abstractmethod

from compatflags.core.registry.types import RegistryValue


class Registry(ABC):
    """Abstract interface for registry operations.

    Read operations never raise for missing keys or values: "not found" is an
    expected outcome and is reported as None or an empty list. Mutations raise
    RegistryWriteError when the store refuses them.
    """

    @abstractmethod
    def search(self, root: str, data: str) -> list[str]:
        """Recursively find keys under root holding a value whose data contains ``data``.

        Returns:
            Matching key paths in the order the registry reports them. Empty when
            root does not exist or nothing matches.
        """
        ...

    @abstractmethod
    def list_subkeys(self, key: str) -> list[str]:
        """List the full paths of the immediate subkeys of ``key``.

        Returns an empty list when key does not exist.
        """
        ...

    @abstractmethod
    def query_value(self, key: str, name: str) -> RegistryValue | None:
        """Read the value called ``name`` from ``key``.

        Returns None when either the key or the value does not exist.
        """
        ...

    @abstractmethod
    def set_value(self, key: str, name: str, data: str, value_type: str = "REG_SZ") -> None:
        """Create or overwrite a value.

        Raises:
            RegistryWriteError: If the write is refused
        """
        ...

    @abstractmethod
    def delete_value(self, key: str, name: str) -> None:
        """Delete a value.

        Raises:
            RegistryWriteError: If the value does not exist or deletion is refused
        """
        ...
