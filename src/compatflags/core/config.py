"""Configuration data structures and loading.

Provides immutable config data loaded from ~/.compatflags/config.toml. The
file is optional: every field has a default, and command-line options override
whatever the file says.
"""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from compatflags.core.constants import DEFAULT_INVALID_CHOICE_DELAY, DEFAULT_TARGET_DISPLAY_NAME
from compatflags.core.types import SearchStrategy

CONFIG_PATH_ENV_VAR = "COMPATFLAGS_CONFIG"


@dataclass(frozen=True)
class CompatConfig:
    """Immutable configuration data.

    Loaded once at CLI entry point and stored in CompatContext.
    """

    target_display_name: str
    search_strategy: SearchStrategy
    invalid_choice_delay: float

    @staticmethod
    def default() -> "CompatConfig":
        return CompatConfig(
            target_display_name=DEFAULT_TARGET_DISPLAY_NAME,
            search_strategy=SearchStrategy.FILTERED,
            invalid_choice_delay=DEFAULT_INVALID_CHOICE_DELAY,
        )


def default_config_path() -> Path:
    """Return the config path, honouring the COMPATFLAGS_CONFIG override."""
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".compatflags" / "config.toml"


def load_config(path: Path) -> CompatConfig:
    """Load config from ``path`` if present; otherwise return defaults.

    Example config:
      target_display_name = "Daum게임 스타터"
      search_strategy = "enumerate"
      invalid_choice_delay = 0.5

    Raises:
        ValueError: If the file is not valid TOML or a field is malformed
    """
    defaults = CompatConfig.default()
    if not path.exists():
        return defaults

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {path}: {e}") from e

    target = data.get("target_display_name", defaults.target_display_name)
    if not isinstance(target, str) or not target.strip():
        raise ValueError(f"'target_display_name' in {path} must be a non-empty string")

    raw_strategy = data.get("search_strategy", defaults.search_strategy.value)
    if not isinstance(raw_strategy, str):
        raise ValueError(f"'search_strategy' in {path} must be a string")
    strategy = SearchStrategy.parse(raw_strategy)

    delay = data.get("invalid_choice_delay", defaults.invalid_choice_delay)
    if isinstance(delay, bool) or not isinstance(delay, (int, float)) or delay < 0:
        raise ValueError(f"'invalid_choice_delay' in {path} must be a non-negative number")

    return CompatConfig(
        target_display_name=target,
        search_strategy=strategy,
        invalid_choice_delay=float(delay),
    )


def save_config(config: CompatConfig, path: Path) -> None:
    """Write ``config`` to ``path`` as commented TOML.

    Creates the parent directory if it doesn't exist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    doc = tomlkit.document()
    doc.add(tomlkit.comment("compatflags configuration"))
    doc.add(tomlkit.nl())
    doc.add(tomlkit.comment("DisplayName of the application's uninstall entry"))
    doc["target_display_name"] = config.target_display_name
    doc.add(tomlkit.comment('"filtered" (one recursive reg query) or "enumerate" (walk subkeys)'))
    doc["search_strategy"] = config.search_strategy.value
    doc.add(tomlkit.comment("Seconds to pause after an invalid menu selection"))
    doc["invalid_choice_delay"] = config.invalid_choice_delay

    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
