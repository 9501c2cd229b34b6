"""Production Registry implementation using reg.exe.

Every command runs through cmd.exe with the console code page switched to
UTF-8 (``chcp 65001``) first. Without that, reg.exe reads and prints the data
filter in the OEM code page and a non-ASCII display name never matches.
"""

import logging

from compatflags.core.registry.abc import Registry
from compatflags.core.registry.parsing import find_value, parse_key_lines, parse_subkeys
from compatflags.core.registry.types import RegistryValue, RegistryWriteError, canonical_key
from compatflags.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

UTF8_CODEPAGE_PREFIX = "chcp 65001 >nul && "


def quote_arg(arg: str) -> str:
    """Quote an operand for reg.exe's command-line parser.

    Trailing backslashes are doubled so they do not escape the closing quote.
    """
    escaped = arg.replace('"', '\\"')
    trailing = len(escaped) - len(escaped.rstrip("\\"))
    return '"' + escaped + "\\" * trailing + '"'


def build_reg_command(subcommand: str, key: str, *options: str) -> str:
    """Build the shell command line for a reg.exe invocation.

    Switches in ``options`` (anything starting with ``/``) pass through as-is;
    the key and every operand are quoted.
    """
    parts = ["reg", subcommand, quote_arg(key)]
    for option in options:
        parts.append(option if option.startswith("/") else quote_arg(option))
    return UTF8_CODEPAGE_PREFIX + " ".join(parts)


def _view_switches(key: str) -> list[str]:
    # Machine-wide uninstall data must be read from the 64-bit view even when
    # this interpreter is a 32-bit process.
    if canonical_key(key).upper().startswith("HKEY_LOCAL_MACHINE\\"):
        return ["/reg:64"]
    return []


class RealRegistry(Registry):
    """Production implementation shelling out to reg.exe.

    Read operations run with check=False: a non-zero exit from ``reg query``
    means "not found" and is reported as None or an empty list. Mutations run
    with check=True and re-raise failures as RegistryWriteError.
    """

    def _read(self, operation_context: str, *args: str) -> str | None:
        result = run_subprocess_with_context(
            build_reg_command(*args),
            operation_context=operation_context,
            check=False,
            shell=True,
            errors="replace",
        )
        if result.returncode != 0:
            logger.debug("Nothing found while trying to %s", operation_context)
            return None
        return result.stdout

    def _write(self, operation_context: str, *args: str) -> None:
        try:
            run_subprocess_with_context(
                build_reg_command(*args),
                operation_context=operation_context,
                shell=True,
                errors="replace",
            )
        except RuntimeError as e:
            raise RegistryWriteError(str(e)) from e

    def search(self, root: str, data: str) -> list[str]:
        output = self._read(
            f"search '{root}' for '{data}'",
            "query",
            root,
            "/s",
            "/f",
            data,
            "/d",
            *_view_switches(root),
        )
        if output is None:
            return []
        return parse_key_lines(output)

    def list_subkeys(self, key: str) -> list[str]:
        output = self._read(f"list subkeys of '{key}'", "query", key, *_view_switches(key))
        if output is None:
            return []
        return parse_subkeys(output, key)

    def query_value(self, key: str, name: str) -> RegistryValue | None:
        output = self._read(
            f"read value '{name}' of '{key}'",
            "query",
            key,
            "/v",
            name,
            *_view_switches(key),
        )
        if output is None:
            return None
        return find_value(output, name)

    def set_value(self, key: str, name: str, data: str, value_type: str = "REG_SZ") -> None:
        self._write(
            f"set value '{name}' of '{key}'",
            "add",
            key,
            "/v",
            name,
            "/t",
            value_type,
            "/d",
            data,
            "/f",
        )

    def delete_value(self, key: str, name: str) -> None:
        self._write(f"delete value '{name}' of '{key}'", "delete", key, "/v", name, "/f")
