# Argbind Argument Binder — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for argbind help rendering."""
from rich.console import Console

console = Console(color_system="truecolor")
