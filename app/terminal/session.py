"""Terminal session — interpret submitted lines as commands or chat messages."""

from __future__ import annotations

import logging
from typing import Protocol

from app.errors import RelayError
from app.terminal import commands
from app.terminal.client import ChatBackend
from app.terminal.state import (
    Scrollback,
    ScrollbackLine,
    SessionMode,
    TranscriptEntry,
)

logger = logging.getLogger(__name__)


class TerminalView(Protocol):
    """Rendering hooks the session drives."""

    def scroll_to_end(self) -> None:
        """Scrollback changed; bring the newest line into view."""

    def clear_input(self) -> None:
        """The submitted line was dispatched; empty the input field."""


class NullView:
    def scroll_to_end(self) -> None:
        pass

    def clear_input(self) -> None:
        pass


class TerminalSession:
    """One visitor's terminal.

    :meth:`submit` is the only entry point. Command-mode lines resolve
    synchronously from the fixed table; chat-mode lines make one relay call
    and hold the session in ``CHAT_AWAITING`` until it settles, during which
    further submissions are dropped.
    """

    def __init__(self, relay: ChatBackend, view: TerminalView | None = None) -> None:
        self.relay = relay
        self.view = view or NullView()
        self.state = SessionMode.COMMAND
        self.scrollback = Scrollback(ScrollbackLine.output(commands.WELCOME))
        self._transcript: list[TranscriptEntry] = []

    # ── Read-only views ──────────────────────────────────────────────

    @property
    def mode(self) -> str:
        return "chat" if self.state.is_chat else "command"

    @property
    def pending(self) -> bool:
        return self.state.pending

    @property
    def lines(self) -> list[ScrollbackLine]:
        return list(self.scrollback)

    @property
    def transcript(self) -> list[TranscriptEntry]:
        return list(self._transcript)

    @property
    def prompt(self) -> str:
        return "🤖>" if self.state.is_chat else ">"

    @property
    def placeholder(self) -> str:
        return "ask me anything..." if self.state.is_chat else "type a command..."

    # ── Entry point ──────────────────────────────────────────────────

    async def submit(self, line: str) -> None:
        if not line.strip() or self.pending:
            return

        if self.state.is_chat:
            await self._handle_chat(line)
        else:
            self._handle_command(line)

    # ── Internals ────────────────────────────────────────────────────

    def _emit(self, raw: str, response: str) -> None:
        self.scrollback.append(ScrollbackLine.echo(raw))
        self.scrollback.append(ScrollbackLine.output(response))
        self.view.scroll_to_end()

    def _clear(self) -> None:
        self.scrollback.reset(ScrollbackLine.output(commands.CLEARED))
        self._transcript.clear()
        self.view.scroll_to_end()

    def _handle_command(self, raw: str) -> None:
        command = commands.normalize(raw)

        if command == commands.CLEAR:
            self._clear()
        elif command == commands.CHATBOT:
            self.state = SessionMode.CHAT_IDLE
            logger.debug("Entered chatbot mode")
            self._emit(raw, commands.CHATBOT_ENABLED)
        elif command in commands.STATIC_RESPONSES:
            self._emit(raw, commands.STATIC_RESPONSES[command])
        else:
            self._emit(raw, commands.not_found(raw))

        self.view.clear_input()

    async def _handle_chat(self, raw: str) -> None:
        command = commands.normalize(raw)

        if command in commands.EXIT_WORDS:
            self.state = SessionMode.COMMAND
            logger.debug("Left chatbot mode")
            self._emit(raw, commands.CHATBOT_EXITED)
            self.view.clear_input()
            return

        if command == commands.CLEAR:
            self._clear()
            self.view.clear_input()
            return

        self.state = SessionMode.CHAT_AWAITING
        self.scrollback.append(ScrollbackLine.echo(raw))
        slot = self.scrollback.append(ScrollbackLine.output(commands.THINKING))
        self.view.scroll_to_end()
        self.view.clear_input()

        history = list(self._transcript)
        try:
            reply = await self.relay.complete(raw, history)
        except RelayError as exc:
            logger.warning("Chat request failed: %s", exc)
            self.scrollback.replace(slot, ScrollbackLine.output(commands.format_error(str(exc))))
        except Exception as exc:
            logger.exception("Chat backend raised unexpectedly")
            reason = str(exc) or commands.FAILED_RESPONSE
            self.scrollback.replace(slot, ScrollbackLine.output(commands.format_error(reason)))
        else:
            self._transcript.append(TranscriptEntry("user", raw))
            self._transcript.append(TranscriptEntry("assistant", reply))
            self.scrollback.replace(slot, ScrollbackLine.output(commands.format_reply(reply)))
        finally:
            self.view.scroll_to_end()
            self.state = SessionMode.CHAT_IDLE
