"""Shared CLI context with lazy-initialized dependencies."""

from dayplan.config import DayplanConfig
from dayplan.models.category import CategoryRegistry
from dayplan.storage import DayStorage


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        day = ctx.storage.load_day(date.today(), ctx.registry)
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config: DayplanConfig | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config: Optional preloaded configuration
        """
        self.verbose = verbose
        self.quiet = quiet

        # Lazy-loaded dependencies
        self._config: DayplanConfig | None = config
        self._registry: CategoryRegistry | None = None
        self._storage: DayStorage | None = None

    @property
    def config(self) -> DayplanConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            self._config = DayplanConfig.from_env()
        return self._config

    @property
    def registry(self) -> CategoryRegistry:
        """Get category registry (lazy-loaded)."""
        if self._registry is None:
            self._registry = CategoryRegistry.load(self.config.categories_path)
        return self._registry

    @property
    def storage(self) -> DayStorage:
        """Get day storage (lazy-loaded)."""
        if self._storage is None:
            self._storage = DayStorage(self.config)
        return self._storage


# Global context instance (set by Typer callback)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context."""
    global _ctx
    _ctx = ctx
