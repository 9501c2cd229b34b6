"""Parsing of ``reg query`` text output.

Layout produced by reg.exe (one result per line, CRLF endings)::

    HKEY_LOCAL_MACHINE\\SOFTWARE\\...\\Uninstall\\DaumGameStarter
        DisplayName    REG_SZ    Daum게임 스타터
        DisplayIcon    REG_SZ    "C:\\Program Files\\Daum\\starter.exe"

    End of search: 1 match(es) found.

Key lines start at column 0 with the long hive name. Value lines are indented
by four spaces and separate name, type and data with runs of four spaces, so
value names containing single spaces (executable paths) survive.
"""

import re

from compatflags.core.registry.types import RegistryValue, keys_equal

KEY_LINE_PREFIX = "HKEY_"

_VALUE_LINE = re.compile(r"^ {4}(?P<name>.+?) {4}(?P<type>REG_[A-Z0-9_]+)(?: {4}(?P<data>.*))?$")
_ICON_INDEX = re.compile(r",\s*-?\d+$")


def parse_key_lines(output: str) -> list[str]:
    """Return every key path printed in the output, in order."""
    keys: list[str] = []
    for line in output.splitlines():
        stripped = line.strip()
        if stripped.startswith(KEY_LINE_PREFIX):
            keys.append(stripped)
    return keys


def parse_values(output: str) -> list[RegistryValue]:
    """Return every value line printed in the output, in order."""
    values: list[RegistryValue] = []
    for line in output.splitlines():
        match = _VALUE_LINE.match(line.rstrip())
        if match is None:
            continue
        values.append(
            RegistryValue(
                name=match.group("name"),
                type=match.group("type"),
                data=match.group("data") or "",
            )
        )
    return values


def find_value(output: str, name: str) -> RegistryValue | None:
    """Find the value called ``name`` (case-insensitive) in the output."""
    wanted = name.casefold()
    for value in parse_values(output):
        if value.name.casefold() == wanted:
            return value
    return None


def parse_subkeys(output: str, parent: str) -> list[str]:
    """Return the immediate subkeys of ``parent`` listed in the output.

    ``reg query <key>`` echoes the key itself before its values; that line and
    anything that is not a direct child are dropped.
    """
    subkeys: list[str] = []
    for key in parse_key_lines(output):
        if keys_equal(key, parent):
            continue
        head, _, _ = key.rpartition("\\")
        if keys_equal(head, parent):
            subkeys.append(key)
    return subkeys


def clean_executable_path(raw: str | None) -> str | None:
    """Strip quotes and a trailing icon index from a DisplayIcon value.

    ``"C:\\Program Files\\App\\app.exe",0`` becomes ``C:\\Program Files\\App\\app.exe``.
    Returns None when nothing usable is left.
    """
    if raw is None:
        return None
    path = raw.strip().replace('"', "")
    path = _ICON_INDEX.sub("", path).strip()
    if not path:
        return None
    return path
