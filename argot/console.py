# Argot Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for Argot help and value rendering."""
from rich.console import Console
from rich.theme import Theme

ARGOT_THEME = Theme(
    {
        "argot.flag": "bold cyan",
        "argot.metavar": "yellow",
        "argot.default": "dim",
        "argot.error": "bold red",
        "argot.ok": "bold green",
    }
)

console = Console(theme=ARGOT_THEME)
