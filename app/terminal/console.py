"""Interactive console front-end for the terminal session.

Usage:
    python -m app.terminal [--relay-url URL]
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from rich.console import Console

from app.config import settings
from app.terminal.client import RelayClient
from app.terminal.session import TerminalSession
from app.terminal.state import LineKind, ScrollbackLine

logger = logging.getLogger(__name__)

_STYLES = {LineKind.INPUT: "bold magenta", LineKind.OUTPUT: "dim"}


class ConsoleView:
    """Prints the scrollback incrementally.

    A console cannot rewrite earlier rows, so a replaced slot (the chat
    placeholder) is printed again below once its final text arrives.
    """

    def __init__(self, console: Console) -> None:
        self.console = console
        self.session: TerminalSession | None = None
        self._rendered: list[ScrollbackLine] = []

    def attach(self, session: TerminalSession) -> None:
        self.session = session
        self.render()

    def render(self) -> None:
        if self.session is None:
            return
        lines = self.session.lines
        if self._rendered and lines[0] is not self._rendered[0]:
            # scrollback was reset by ``clear``
            self.console.clear()
            self._rendered = []
        for i, line in enumerate(lines):
            if i < len(self._rendered) and self._rendered[i] is line:
                continue
            self.console.print(line.text, style=_STYLES[line.kind], markup=False, highlight=False)
        self._rendered = lines

    def scroll_to_end(self) -> None:
        self.render()

    def clear_input(self) -> None:
        # Each prompt reads a fresh line
        pass


async def run(session: TerminalSession, console: Console) -> None:
    while True:
        try:
            line = await asyncio.to_thread(console.input, f"[bold]{session.prompt}[/bold] ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return
        await session.submit(line)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="portfolio-terminal", description=__doc__.splitlines()[0])
    parser.add_argument("--relay-url", default=settings.relay_url, help="chatbot relay endpoint")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
    )

    console = Console()
    view = ConsoleView(console)
    relay = RelayClient(args.relay_url, token=settings.relay_token, timeout=settings.relay_timeout)
    session = TerminalSession(relay, view)
    view.attach(session)
    logger.debug("Relay endpoint: %s", args.relay_url)
    asyncio.run(run(session, console))
