"""Types shared by every Registry implementation."""

from dataclasses import dataclass

HIVE_ALIASES = {
    "HKLM": "HKEY_LOCAL_MACHINE",
    "HKCU": "HKEY_CURRENT_USER",
    "HKCR": "HKEY_CLASSES_ROOT",
    "HKU": "HKEY_USERS",
    "HKCC": "HKEY_CURRENT_CONFIG",
}


class RegistryWriteError(RuntimeError):
    """Raised when the registry rejects a mutation (add or delete)."""


@dataclass(frozen=True)
class RegistryValue:
    """A single value line of a registry key: name, type tag and data."""

    name: str
    type: str
    data: str


def canonical_key(key: str) -> str:
    """Expand the hive abbreviation and drop surrounding noise from a key path.

    ``reg.exe`` accepts ``HKLM\\...`` but prints ``HKEY_LOCAL_MACHINE\\...``,
    so every comparison between keys goes through this function first.
    """
    cleaned = key.strip().strip("\\")
    hive, sep, rest = cleaned.partition("\\")
    hive = HIVE_ALIASES.get(hive.upper(), hive.upper())
    return f"{hive}{sep}{rest}"


def keys_equal(left: str, right: str) -> bool:
    """Registry keys compare case-insensitively."""
    return canonical_key(left).casefold() == canonical_key(right).casefold()


def child_key_name(parent: str, key: str) -> str | None:
    """Return the immediate child segment of ``key`` below ``parent``, if any."""
    parent_prefix = canonical_key(parent).casefold() + "\\"
    candidate = canonical_key(key)
    if not candidate.casefold().startswith(parent_prefix):
        return None
    remainder = candidate[len(parent_prefix) :]
    if not remainder:
        return None
    return remainder.split("\\", 1)[0]
