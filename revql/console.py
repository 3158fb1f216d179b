"""Shared consoles for CLI output.

``console`` carries results (stdout); ``err_console`` carries status lines
and errors (stderr) so results can be piped.
"""

from __future__ import annotations

from rich.console import Console

console = Console()
err_console = Console(stderr=True)
