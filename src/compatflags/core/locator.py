"""Installation lookup over the registry's uninstall records."""

import logging
from collections.abc import Sequence

from compatflags.core.constants import DISPLAY_ICON_VALUE, DISPLAY_NAME_VALUE, UNINSTALL_ROOTS
from compatflags.core.registry.abc import Registry
from compatflags.core.registry.parsing import clean_executable_path
from compatflags.core.types import InstallationRecord, SearchStrategy

logger = logging.getLogger(__name__)


class InstallationLocator:
    """Finds an application's uninstall entry and its executable path.

    Roots are searched one at a time in order; the first root that yields a
    matching subkey ends the search. A missing root, or a subkey without the
    looked-up value, is simply "no match" and the search moves on.
    """

    def __init__(
        self,
        registry: Registry,
        *,
        strategy: SearchStrategy = SearchStrategy.FILTERED,
        roots: Sequence[str] = UNINSTALL_ROOTS,
    ) -> None:
        self._registry = registry
        self._strategy = strategy
        self._roots = tuple(roots)

    @property
    def strategy(self) -> SearchStrategy:
        return self._strategy

    def locate(self, target_display_name: str) -> InstallationRecord:
        """Look up ``target_display_name`` across every uninstall root.

        Returns:
            ``installed=False`` when no root matches. When a match has no
            DisplayIcon value the record is installed with no executable path.
        """
        for root in self._roots:
            key = self._find_matching_key(root, target_display_name)
            if key is None:
                continue
            logger.debug("Found '%s' at %s", target_display_name, key)
            executable_path = self._read_executable_path(key)
            return InstallationRecord(installed=True, executable_path=executable_path)

        logger.debug("'%s' not found under any uninstall root", target_display_name)
        return InstallationRecord.not_installed()

    def _find_matching_key(self, root: str, target: str) -> str | None:
        if self._strategy is SearchStrategy.FILTERED:
            return self._search_filtered(root, target)
        return self._search_enumerated(root, target)

    def _search_filtered(self, root: str, target: str) -> str | None:
        matches = self._registry.search(root, target)
        if not matches:
            return None
        return matches[0]

    def _search_enumerated(self, root: str, target: str) -> str | None:
        for subkey in self._registry.list_subkeys(root):
            display_name = self._registry.query_value(subkey, DISPLAY_NAME_VALUE)
            if display_name is None:
                continue
            if target in display_name.data:
                return subkey
        return None

    def _read_executable_path(self, key: str) -> str | None:
        icon = self._registry.query_value(key, DISPLAY_ICON_VALUE)
        if icon is None:
            return None
        return clean_executable_path(icon.data)
