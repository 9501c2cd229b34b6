"""Domain types for installation lookup and compatibility flags."""

from dataclasses import dataclass
from enum import Enum


class SearchStrategy(Enum):
    """How InstallationLocator walks an uninstall root.

    FILTERED asks the registry for a recursive data search in one call per root.
    ENUMERATE lists the root's subkeys and reads each DisplayName in turn; it is
    slower but does not depend on reg.exe's handling of non-ASCII filters.
    """

    FILTERED = "filtered"
    ENUMERATE = "enumerate"

    @classmethod
    def parse(cls, raw: str) -> "SearchStrategy":
        """Parse a strategy name (case-insensitive).

        Raises:
            ValueError: If raw names no strategy
        """
        try:
            return cls(raw.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(
                f"Unknown search strategy '{raw}' (expected one of: {choices})"
            ) from None


@dataclass(frozen=True)
class InstallationRecord:
    """Result of one installation lookup. Never cached between menu iterations."""

    installed: bool
    executable_path: str | None = None

    @staticmethod
    def not_installed() -> "InstallationRecord":
        return InstallationRecord(installed=False, executable_path=None)
