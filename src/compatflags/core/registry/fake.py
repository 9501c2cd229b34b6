"""Fake Registry implementation for testing.

FakeRegistry is an in-memory implementation that accepts pre-configured keys
in its constructor. Construct instances directly with keyword arguments.
"""

from collections.abc import Mapping

from compatflags.core.registry.abc import Registry
from compatflags.core.registry.types import (
    RegistryValue,
    RegistryWriteError,
    canonical_key,
    child_key_name,
    keys_equal,
)


class FakeRegistry(Registry):
    """In-memory fake implementation of registry operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments; mutations made through the Registry interface are
    applied to the in-memory store so that later reads observe them.

    Examples:
        >>> registry = FakeRegistry(
        ...     keys={
        ...         r"HKLM\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\App": {
        ...             "DisplayName": "App",
        ...         }
        ...     }
        ... )
        >>> registry.query_value(
        ...     r"HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\App",
        ...     "displayname",
        ... ).data
        'App'
    """

    def __init__(
        self,
        *,
        keys: Mapping[str, Mapping[str, str]] | None = None,
        write_error: str | None = None,
    ) -> None:
        """Create FakeRegistry with pre-configured keys.

        Args:
            keys: Mapping of key path -> {value name -> REG_SZ data}. Keys may use
                short (HKLM) or long (HKEY_LOCAL_MACHINE) hive names.
            write_error: When set, every set_value/delete_value raises
                RegistryWriteError with this message (simulates access denied).
        """
        self._keys: dict[str, dict[str, RegistryValue]] = {}
        for key, values in (keys or {}).items():
            self._keys[canonical_key(key)] = {
                name: RegistryValue(name=name, type="REG_SZ", data=data)
                for name, data in values.items()
            }
        self._write_error = write_error
        self._search_calls: list[tuple[str, str]] = []
        self._list_subkeys_calls: list[str] = []
        self._query_value_calls: list[tuple[str, str]] = []
        self._set_value_calls: list[tuple[str, str, str, str]] = []
        self._delete_value_calls: list[tuple[str, str]] = []

    @property
    def search_calls(self) -> list[tuple[str, str]]:
        """Read-only access to tracked search() calls as (root, data) tuples."""
        return self._search_calls

    @property
    def list_subkeys_calls(self) -> list[str]:
        """Read-only access to tracked list_subkeys() calls."""
        return self._list_subkeys_calls

    @property
    def query_value_calls(self) -> list[tuple[str, str]]:
        """Read-only access to tracked query_value() calls as (key, name) tuples."""
        return self._query_value_calls

    @property
    def set_value_calls(self) -> list[tuple[str, str, str, str]]:
        """Read-only access to tracked set_value() calls as (key, name, data, type)."""
        return self._set_value_calls

    @property
    def delete_value_calls(self) -> list[tuple[str, str]]:
        """Read-only access to tracked delete_value() calls as (key, name)."""
        return self._delete_value_calls

    def values_of(self, key: str) -> dict[str, str]:
        """Snapshot of a key's values as {name: data}, for test assertions."""
        values = self._find_key(key)
        if values is None:
            return {}
        return {value.name: value.data for value in values.values()}

    def _find_key(self, key: str) -> dict[str, RegistryValue] | None:
        for existing, values in self._keys.items():
            if keys_equal(existing, key):
                return values
        return None

    def _find_value_name(self, values: dict[str, RegistryValue], name: str) -> str | None:
        for existing in values:
            if existing.casefold() == name.casefold():
                return existing
        return None

    def _descendants(self, root: str) -> list[str]:
        prefix = canonical_key(root).casefold() + "\\"
        return [
            key
            for key in self._keys
            if keys_equal(key, root) or key.casefold().startswith(prefix)
        ]

    def search(self, root: str, data: str) -> list[str]:
        self._search_calls.append((root, data))
        needle = data.casefold()
        matches: list[str] = []
        for key in self._descendants(root):
            if any(needle in value.data.casefold() for value in self._keys[key].values()):
                matches.append(key)
        return matches

    def list_subkeys(self, key: str) -> list[str]:
        self._list_subkeys_calls.append(key)
        parent = canonical_key(key)
        subkeys: list[str] = []
        seen: set[str] = set()
        for existing in self._keys:
            child = child_key_name(parent, existing)
            if child is None or child.casefold() in seen:
                continue
            seen.add(child.casefold())
            subkeys.append(f"{parent}\\{child}")
        return subkeys

    def query_value(self, key: str, name: str) -> RegistryValue | None:
        self._query_value_calls.append((key, name))
        values = self._find_key(key)
        if values is None:
            return None
        existing = self._find_value_name(values, name)
        if existing is None:
            return None
        return values[existing]

    def set_value(self, key: str, name: str, data: str, value_type: str = "REG_SZ") -> None:
        self._set_value_calls.append((key, name, data, value_type))
        if self._write_error is not None:
            raise RegistryWriteError(self._write_error)
        values = self._find_key(key)
        if values is None:
            values = {}
            self._keys[canonical_key(key)] = values
        existing = self._find_value_name(values, name)
        if existing is not None:
            del values[existing]
        values[name] = RegistryValue(name=name, type=value_type, data=data)

    def delete_value(self, key: str, name: str) -> None:
        self._delete_value_calls.append((key, name))
        if self._write_error is not None:
            raise RegistryWriteError(self._write_error)
        values = self._find_key(key)
        existing = None if values is None else self._find_value_name(values, name)
        if values is None or existing is None:
            raise RegistryWriteError(
                "ERROR: The system was unable to find the specified registry key or value."
            )
        del values[existing]
