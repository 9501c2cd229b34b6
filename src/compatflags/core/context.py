"""Application context with dependency injection."""

from dataclasses import dataclass, replace
from pathlib import Path

from compatflags.core.compat_flags import CompatibilityFlagManager
from compatflags.core.config import CompatConfig, default_config_path, load_config
from compatflags.core.console import ClickConsole, Console
from compatflags.core.locator import InstallationLocator
from compatflags.core.registry.abc import Registry
from compatflags.core.registry.dry_run import DryRunRegistry
from compatflags.core.registry.real import RealRegistry
from compatflags.core.time.abc import Time
from compatflags.core.time.real import RealTime
from compatflags.core.types import SearchStrategy


@dataclass(frozen=True)
class CompatContext:
    """Immutable context holding all dependencies for compatflags operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    registry: Registry
    console: Console
    time: Time
    config: CompatConfig
    config_path: Path
    dry_run: bool

    @property
    def locator(self) -> InstallationLocator:
        return InstallationLocator(self.registry, strategy=self.config.search_strategy)

    @property
    def flags(self) -> CompatibilityFlagManager:
        return CompatibilityFlagManager(self.registry)

    def with_overrides(
        self,
        *,
        target: str | None = None,
        strategy: SearchStrategy | None = None,
        dry_run: bool = False,
    ) -> "CompatContext":
        """Apply command-line overrides on top of the loaded configuration.

        Enabling dry-run wraps the registry once; it is never unwrapped.
        """
        config = self.config
        if target is not None:
            config = replace(config, target_display_name=target)
        if strategy is not None:
            config = replace(config, search_strategy=strategy)

        registry = self.registry
        if dry_run and not self.dry_run:
            registry = DryRunRegistry(registry)

        return replace(self, config=config, registry=registry, dry_run=self.dry_run or dry_run)

    @staticmethod
    def for_test(
        registry: Registry | None = None,
        console: Console | None = None,
        time: Time | None = None,
        config: CompatConfig | None = None,
        config_path: Path | None = None,
        dry_run: bool = False,
    ) -> "CompatContext":
        """Create test context with optional pre-configured dependencies.

        Args:
            registry: Optional Registry implementation. If None, creates empty FakeRegistry.
            console: Optional Console. If None, uses ClickConsole (works with CliRunner input).
            time: Optional Time implementation. If None, creates FakeTime.
            config: Optional CompatConfig. If None, uses CompatConfig.default().
            config_path: Optional config location. If None, uses a path that never exists.
            dry_run: Whether the registry is already wrapped for dry-run.

        Returns:
            CompatContext configured with provided values and test defaults
        """
        from compatflags.core.registry.fake import FakeRegistry
        from compatflags.core.time.fake import FakeTime

        return CompatContext(
            registry=registry if registry is not None else FakeRegistry(),
            console=console if console is not None else ClickConsole(),
            time=time if time is not None else FakeTime(),
            config=config if config is not None else CompatConfig.default(),
            config_path=config_path if config_path is not None else Path("/test/compatflags.toml"),
            dry_run=dry_run,
        )


def create_context(config_path: Path | None = None) -> CompatContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If the config file exists but is malformed
    """
    path = config_path if config_path is not None else default_config_path()
    return CompatContext(
        registry=RealRegistry(),
        console=ClickConsole(),
        time=RealTime(),
        config=load_config(path),
        config_path=path,
        dry_run=False,
    )
