"""Per-user RunAsInvoker compatibility flag management."""

import logging

from compatflags.core.constants import COMPAT_FLAGS_KEY, RUN_AS_INVOKER_DATA, RUN_AS_INVOKER_MARKER
from compatflags.core.registry.abc import Registry

logger = logging.getLogger(__name__)


class CompatibilityFlagManager:
    """Checks, sets and clears the compatibility value named after an executable.

    Only the value named exactly by the executable path is ever read or
    written; other entries under the key are left alone.
    """

    def __init__(self, registry: Registry, *, key: str = COMPAT_FLAGS_KEY) -> None:
        self._registry = registry
        self._key = key

    def is_set(self, path: str | None) -> bool:
        """True iff a value named ``path`` exists and contains the RunAsInvoker marker."""
        if not path:
            return False
        value = self._registry.query_value(self._key, path)
        if value is None:
            return False
        return RUN_AS_INVOKER_MARKER in value.data

    def apply(self, path: str) -> None:
        """Write ``~ RunAsInvoker`` for ``path``, overwriting any existing value.

        Raises:
            RegistryWriteError: If the registry refuses the write
        """
        logger.debug("Applying %s to %s", RUN_AS_INVOKER_DATA, path)
        self._registry.set_value(self._key, path, RUN_AS_INVOKER_DATA)

    def remove(self, path: str) -> None:
        """Delete the compatibility value for ``path``.

        Raises:
            RegistryWriteError: If the value does not exist or deletion is refused
        """
        logger.debug("Removing compatibility flags for %s", path)
        self._registry.delete_value(self._key, path)
