"""Shared Rich console instance for consistent terminal output."""

from rich.console import Console

# Shared console instance used by all display renderers
console = Console()

# Diagnostics that must not mix with machine-readable stdout
err_console = Console(stderr=True)
