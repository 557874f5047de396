from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.text import Text


class RichLogger:
    def __init__(
        self,
        console: Optional[Console] = None,
        verbose: bool = False,
        err_console: Optional[Console] = None,
    ):
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)
        self.verbose = verbose

    def _emit(self, level: str, msg: str, style: str, console: Optional[Console] = None) -> None:
        tag = Text(level.ljust(5), style=style)
        (console or self.console).log(tag, msg, markup=False)

    def info(self, msg: str) -> None:
        self._emit("INFO", msg, "bold green")

    def warn(self, msg: str) -> None:
        self._emit("WARN", msg, "bold yellow", self.err_console)

    def error(self, msg: str) -> None:
        self._emit("ERROR", msg, "bold red", self.err_console)

    def debug(self, msg: str) -> None:
        if not self.verbose:
            return
        self._emit("DEBUG", msg, "bold blue")

    def done(self, msg: str) -> None:
        self._emit("DONE", msg, "bold cyan")
