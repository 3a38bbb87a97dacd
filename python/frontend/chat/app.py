"""Terminal chat frontend — drives the command dispatcher from stdin.

Each input line is one message.  A leading ``#name`` switches the current
channel, so several boards can be kept side by side::

    #general ~maze
    ~up
    #random ~start
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from frontend.chat.commands import COMMAND_PREFIX, CommandDispatcher

logger = logging.getLogger(__name__)

console = Console()


def _split_channel(line: str, channel: str) -> tuple[str, str]:
    """Return ``(channel, message)`` for an input line."""
    if line.startswith("#"):
        name, _, rest = line[1:].partition(" ")
        if name:
            return name, rest.strip()
    return channel, line


def _reply(channel: str, text: str) -> None:
    body = text.replace("```\n", "").replace("\n```", "")
    console.print(
        Panel(
            Text(body),
            title=f"[bold cyan]#{channel}[/bold cyan]",
            border_style="bright_blue",
            expand=False,
        )
    )


def run(
    channel: str = "terminal",
    prefix: str = COMMAND_PREFIX,
    dispatcher: CommandDispatcher | None = None,
) -> None:
    dispatcher = dispatcher or CommandDispatcher(prefix=prefix)
    console.print(
        f"[dim]Type [bold]{prefix}help[/bold] for commands, "
        "[bold]#name[/bold] to switch channel, Ctrl-D to quit.[/dim]"
    )

    while True:
        try:
            line = console.input(f"[bold green]#{channel}>[/bold green] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return

        channel, message = _split_channel(line.strip(), channel)
        if not message:
            continue

        reply = dispatcher.handle(channel, message)
        if reply is None:
            logger.debug("ignored %r", message)
            continue
        _reply(channel, reply)
