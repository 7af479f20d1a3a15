"""Console front-end rendering tests."""

import io

import pytest
from rich.console import Console

from app.terminal import commands
from app.terminal.console import ConsoleView, run
from app.terminal.session import TerminalSession


class EchoRelay:
    async def complete(self, message, transcript):
        return f"you said {message}"


def _console() -> tuple[Console, io.StringIO]:
    buf = io.StringIO()
    return Console(file=buf, force_terminal=False, width=120), buf


def _view_session():
    console, buf = _console()
    view = ConsoleView(console)
    session = TerminalSession(EchoRelay(), view)
    view.attach(session)
    return session, buf


@pytest.mark.asyncio
async def test_prints_only_new_lines():
    session, buf = _view_session()
    await session.submit("discord")
    await session.submit("server")

    out = buf.getvalue()
    assert out.count(commands.WELCOME) == 1
    assert out.count("💬 Discord: arcticayl") == 1
    assert "🎮 Discord Server: discord.gg/aerox" in out


@pytest.mark.asyncio
async def test_replaced_placeholder_is_reprinted():
    session, buf = _view_session()
    await session.submit("chatbot")
    await session.submit("hi")

    out = buf.getvalue()
    assert commands.THINKING in out
    assert out.index(commands.THINKING) < out.index("🤖 you said hi")


@pytest.mark.asyncio
async def test_run_feeds_lines_until_eof(monkeypatch):
    console, buf = _console()
    view = ConsoleView(console)
    session = TerminalSession(EchoRelay(), view)
    view.attach(session)

    lines = iter(["about", "webinfo"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(console, "input", fake_input)
    await run(session, console)

    out = buf.getvalue()
    assert "Name: Alya" in out
    assert "Inspiration: cursi.ng" in out
