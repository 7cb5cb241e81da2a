"""Console output and error handling for the seedplane CLI."""

from collections.abc import Callable
from functools import wraps
from typing import Any

import typer
import yaml
from loguru import logger
from rich.console import Console, ConsoleRenderable
from rich.panel import Panel
from rich.status import Status
from rich.syntax import Syntax

from src.controlplane.errors import CollaboratorError, ControlPlaneError

_MARKERS = {
    "info": "[cyan]ℹ[/cyan] ",
    "ok": "[green]✅[/green]",
    "warn": "[yellow]⚠️[/yellow] ",
    "error": "[red]❌[/red]",
}


class CLIConsole:
    """Rich console with the message styles used by all commands."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _emit(self, kind: str, msg: str) -> None:
        self.console.print(f"{_MARKERS[kind]} {msg}")

    def print(self, msg: ConsoleRenderable | str | None = None) -> None:
        self.console.print(msg)

    def status(self, status: str) -> Status:
        return self.console.status(status)

    def info(self, msg: str) -> None:
        self._emit("info", msg)

    def ok(self, msg: str) -> None:
        self._emit("ok", msg)

    def warn(self, msg: str) -> None:
        self._emit("warn", msg)

    def error(self, msg: str) -> None:
        self._emit("error", msg)

    def print_header(self, title: str) -> None:
        self.console.print(Panel.fit(f"[bold blue]{title}[/bold blue]", border_style="blue"))

    def print_release_values(
        self, release_name: str, values: dict[str, Any], *, layer: str = "defaults"
    ) -> None:
        """Print one values layer of a release as YAML.

        Values are rendered through ``Syntax`` so that brackets in config
        content are not taken for rich markup.
        """
        self.console.print(f"[bold cyan]# {release_name} ({layer})[/bold cyan]")
        text = yaml.safe_dump(values, sort_keys=False, default_flow_style=False)
        self.console.print(Syntax(text, "yaml"))

    def handle_error(
        self, message: str, details: str | None = None, exit_code: int = 1
    ) -> None:
        """Print an error with optional details and exit.

        Raises:
            typer.Exit: Always, with ``exit_code``
        """
        self.error(f"[bold red]{message}[/bold red]")
        if details:
            self.console.print(Panel(details, title="Details", border_style="red"))
        raise typer.Exit(exit_code)


def with_error_handling(func: Callable[..., None]) -> Callable[..., None]:
    """Turn control plane and configuration errors into a clean CLI exit.

    Collaborator failures (helm, cluster, image vector, DNS) exit with 2 so
    that callers can tell them apart from invalid input, which exits with 1.
    """

    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> None:
        try:
            func(*args, **kwargs)
        except CollaboratorError as e:
            logger.debug(f"{type(e).__name__}: {e.message}")
            console.handle_error(e.message, e.details, exit_code=2)
        except ControlPlaneError as e:
            console.handle_error(e.message, e.details)
        except (ValueError, FileNotFoundError) as e:
            console.handle_error("Invalid configuration", str(e))
        except KeyboardInterrupt:
            console.print("\n[dim]Cancelled.[/dim]")
            raise typer.Exit(130) from None

    return wrapper


console = CLIConsole()
