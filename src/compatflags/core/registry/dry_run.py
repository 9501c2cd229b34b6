"""Dry-run Registry wrapper.

Reads are delegated to the wrapped implementation so the status shown to the
operator is real; mutations are printed instead of executed.
"""

from compatflags.cli.output import user_output
from compatflags.core.registry.abc import Registry
from compatflags.core.registry.real import build_reg_command
from compatflags.core.registry.types import RegistryValue


class DryRunRegistry(Registry):
    """Wrapper that prevents execution of registry mutations.

    Usage:
        real_registry = RealRegistry()
        registry = DryRunRegistry(real_registry)

        # Prints the reg.exe command instead of writing
        registry.set_value(COMPAT_FLAGS_KEY, path, RUN_AS_INVOKER_DATA)
    """

    def __init__(self, wrapped: Registry) -> None:
        """Create a dry-run wrapper around a Registry implementation.

        Args:
            wrapped: The Registry implementation to wrap (usually RealRegistry or FakeRegistry)
        """
        self._wrapped = wrapped

    # Read-only operations: delegate to wrapped implementation

    def search(self, root: str, data: str) -> list[str]:
        return self._wrapped.search(root, data)

    def list_subkeys(self, key: str) -> list[str]:
        return self._wrapped.list_subkeys(key)

    def query_value(self, key: str, name: str) -> RegistryValue | None:
        return self._wrapped.query_value(key, name)

    # Mutations: print what would run

    def set_value(self, key: str, name: str, data: str, value_type: str = "REG_SZ") -> None:
        command = build_reg_command("add", key, "/v", name, "/t", value_type, "/d", data, "/f")
        user_output(f"[DRY RUN] Would run: {command}")

    def delete_value(self, key: str, name: str) -> None:
        command = build_reg_command("delete", key, "/v", name, "/f")
        user_output(f"[DRY RUN] Would run: {command}")
