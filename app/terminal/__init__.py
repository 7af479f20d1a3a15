from app.terminal.client import RelayClient
from app.terminal.session import NullView, TerminalSession, TerminalView
from app.terminal.state import LineKind, ScrollbackLine, SessionMode, TranscriptEntry

__all__ = [
    "LineKind",
    "NullView",
    "RelayClient",
    "ScrollbackLine",
    "SessionMode",
    "TerminalSession",
    "TerminalView",
    "TranscriptEntry",
]
