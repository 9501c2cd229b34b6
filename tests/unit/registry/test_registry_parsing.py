"""Tests for reg.exe output parsing against captured sample outputs."""

from compatflags.core.registry.parsing import (
    clean_executable_path,
    find_value,
    parse_key_lines,
    parse_subkeys,
    parse_values,
)
from compatflags.core.registry.types import RegistryValue

SEARCH_OUTPUT = (
    "\r\n"
    "HKEY_LOCAL_MACHINE\\SOFTWARE\\WOW6432Node\\Microsoft\\Windows\\CurrentVersion\\Uninstall"
    "\\DaumGameStarter\r\n"
    "    DisplayName    REG_SZ    Daum게임 스타터\r\n"
    "\r\n"
    "End of search: 1 match(es) found.\r\n"
)

ICON_OUTPUT = (
    "\r\n"
    "HKEY_LOCAL_MACHINE\\SOFTWARE\\WOW6432Node\\Microsoft\\Windows\\CurrentVersion\\Uninstall"
    "\\DaumGameStarter\r\n"
    '    DisplayIcon    REG_SZ    '
    '"C:\\Program Files (x86)\\Daum\\GameStarter\\DaumGameStarter.exe"\r\n'
    "\r\n"
)

LIST_OUTPUT = (
    "\r\n"
    "HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Uninstall\r\n"
    "    (Default)    REG_SZ    \r\n"
    "\r\n"
    "HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\7-Zip\r\n"
    "HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\{A1B2C3}\r\n"
)

COMPAT_OUTPUT = (
    "\r\n"
    "HKEY_CURRENT_USER\\Software\\Microsoft\\Windows NT\\CurrentVersion\\AppCompatFlags\\Layers\r\n"
    "    C:\\Program Files (x86)\\Daum\\GameStarter\\DaumGameStarter.exe"
    "    REG_SZ    ~ RunAsInvoker\r\n"
    "\r\n"
)


def test_parse_key_lines_returns_matched_keys_only() -> None:
    keys = parse_key_lines(SEARCH_OUTPUT)

    assert keys == [
        "HKEY_LOCAL_MACHINE\\SOFTWARE\\WOW6432Node\\Microsoft\\Windows\\CurrentVersion"
        "\\Uninstall\\DaumGameStarter"
    ]


def test_parse_key_lines_empty_output() -> None:
    assert parse_key_lines("") == []
    assert parse_key_lines("\r\nEnd of search: 0 match(es) found.\r\n") == []


def test_parse_values_reads_non_ascii_data() -> None:
    values = parse_values(SEARCH_OUTPUT)

    assert values == [RegistryValue(name="DisplayName", type="REG_SZ", data="Daum게임 스타터")]


def test_parse_values_keeps_spaces_in_value_names() -> None:
    values = parse_values(COMPAT_OUTPUT)

    assert len(values) == 1
    assert values[0].name == "C:\\Program Files (x86)\\Daum\\GameStarter\\DaumGameStarter.exe"
    assert values[0].type == "REG_SZ"
    assert values[0].data == "~ RunAsInvoker"


def test_parse_values_handles_empty_data() -> None:
    values = parse_values(LIST_OUTPUT)

    assert values == [RegistryValue(name="(Default)", type="REG_SZ", data="")]


def test_find_value_is_case_insensitive() -> None:
    value = find_value(ICON_OUTPUT, "displayicon")

    assert value is not None
    assert value.data == '"C:\\Program Files (x86)\\Daum\\GameStarter\\DaumGameStarter.exe"'


def test_find_value_missing_returns_none() -> None:
    assert find_value(ICON_OUTPUT, "DisplayName") is None


def test_parse_subkeys_drops_parent_line() -> None:
    parent = "HKLM\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Uninstall"

    subkeys = parse_subkeys(LIST_OUTPUT, parent)

    assert subkeys == [
        "HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\7-Zip",
        "HKEY_LOCAL_MACHINE\\SOFTWARE\\Microsoft\\Windows\\CurrentVersion\\Uninstall\\{A1B2C3}",
    ]


def test_clean_executable_path_strips_quotes() -> None:
    raw = '"C:\\Program Files\\App\\app.exe"'

    assert clean_executable_path(raw) == "C:\\Program Files\\App\\app.exe"


def test_clean_executable_path_drops_icon_index() -> None:
    assert clean_executable_path('"C:\\App\\app.exe",0') == "C:\\App\\app.exe"
    assert clean_executable_path("C:\\App\\app.exe,-101") == "C:\\App\\app.exe"


def test_clean_executable_path_unquoted_is_unchanged() -> None:
    assert clean_executable_path("C:\\App\\app.exe") == "C:\\App\\app.exe"


def test_clean_executable_path_empty_values() -> None:
    assert clean_executable_path(None) is None
    assert clean_executable_path("") is None
    assert clean_executable_path('""') is None
