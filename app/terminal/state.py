"""Terminal session state — scrollback arena, transcript entries, session mode."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from typing import Literal


class LineKind(StrEnum):
    INPUT = "input"
    OUTPUT = "output"


@dataclass(frozen=True)
class ScrollbackLine:
    kind: LineKind
    text: str

    @classmethod
    def echo(cls, raw: str) -> ScrollbackLine:
        return cls(LineKind.INPUT, f"> {raw}")

    @classmethod
    def output(cls, text: str) -> ScrollbackLine:
        return cls(LineKind.OUTPUT, text)


class Scrollback:
    """Append-only sequence of lines addressed by slot index.

    The only mutation besides appending is :meth:`replace`, used to swap a
    placeholder slot for its final text; the slot index stays stable so a
    view can re-render just that row.
    """

    def __init__(self, first: ScrollbackLine) -> None:
        self._slots: list[ScrollbackLine] = [first]

    def append(self, line: ScrollbackLine) -> int:
        self._slots.append(line)
        return len(self._slots) - 1

    def replace(self, index: int, line: ScrollbackLine) -> None:
        self._slots[index] = line

    def reset(self, first: ScrollbackLine) -> None:
        self._slots = [first]

    def __getitem__(self, index: int) -> ScrollbackLine:
        return self._slots[index]

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[ScrollbackLine]:
        return iter(self._slots)


@dataclass(frozen=True)
class TranscriptEntry:
    role: Literal["user", "assistant"]
    text: str


class SessionMode(StrEnum):
    """Command vs chat, with the awaiting-reply state folded in.

    Replaces a ``chat_mode`` / ``pending`` flag pair: "pending while in
    command mode" has no member, so it cannot be represented.
    """

    COMMAND = "command"
    CHAT_IDLE = "chat_idle"
    CHAT_AWAITING = "chat_awaiting"

    @property
    def is_chat(self) -> bool:
        return self is not SessionMode.COMMAND

    @property
    def pending(self) -> bool:
        return self is SessionMode.CHAT_AWAITING
