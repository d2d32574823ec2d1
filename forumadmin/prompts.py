"""Line-based terminal prompts.

The Console reads through an injected LineReader and writes through an
injected writer, so tests can script input and capture output.
"""
from __future__ import annotations

import asyncio
import threading
from collections.abc import Callable, Iterable, Sequence
from typing import Protocol

from forumadmin import formatting
from forumadmin.formatting import Level


class InvalidChoiceError(ValueError):
    """Answer to a numbered menu was not one of its options."""

    def __init__(self, answer: str = ""):
        super().__init__("Invalid choice")
        self.answer = answer


class LineReader(Protocol):
    async def __call__(self, prompt: str) -> str:
        """Show prompt, wait for one line of input, return it without the newline."""
        ...


class TerminalReader:
    """Reads from stdin. input() runs in a daemon thread so the event loop stays free.

    The thread is not joined: on Ctrl-C the process exits even though the
    thread is still blocked in input().
    """

    async def __call__(self, prompt: str) -> str:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[str] = loop.create_future()

        def _resolve(line: str | None, error: Exception | None) -> None:
            if future.done():
                return
            if error is not None:
                future.set_exception(error)
            else:
                future.set_result(line)

        def _read() -> None:
            try:
                line = input(prompt)
            except Exception as e:
                loop.call_soon_threadsafe(_resolve, None, e)
            else:
                loop.call_soon_threadsafe(_resolve, line, None)

        threading.Thread(target=_read, name="terminal-reader", daemon=True).start()
        return await future


class ScriptedReader:
    """Replays fixed answers and records every prompt shown."""

    def __init__(self, lines: Iterable[str]):
        self._lines = list(lines)
        self.prompts: list[str] = []

    async def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError("no scripted input left")
        return self._lines.pop(0)


class Console:
    """Prompts and status output for one interactive session."""

    def __init__(
        self,
        reader: LineReader,
        writer: Callable[[str], None] = print,
        color: bool = True,
    ):
        self._reader = reader
        self._writer = writer
        self.color = color

    def _style(self, text: str, level: Level, highlights: Sequence[str] = ()) -> str:
        return formatting.colorize(text, level, highlights) if self.color else text

    def emit(self, level: Level, text: str, *highlights: str) -> None:
        """Write one line. highlights are substrings (names, emails) shown in white."""
        self._writer(self._style(text, level, highlights))

    def heading(self, text: str, *highlights: str) -> None:
        self.emit(Level.HEADING, text, *highlights)

    def info(self, text: str, *highlights: str) -> None:
        self.emit(Level.INFO, text, *highlights)

    def success(self, text: str, *highlights: str) -> None:
        self.emit(Level.SUCCESS, text, *highlights)

    def warning(self, text: str, *highlights: str) -> None:
        self.emit(Level.WARNING, text, *highlights)

    def error(self, text: str, *highlights: str) -> None:
        self.emit(Level.ERROR, text, *highlights)

    async def prompt_for_input(self, message: str) -> str:
        """Free-text answer, stripped. An empty answer is returned as ''."""
        answer = await self._reader(f"{self._style(message, Level.PROMPT)} ")
        return answer.strip()

    async def prompt_user_choice(self, message: str, options: Sequence[str]) -> str:
        """Numbered menu. Returns the chosen 1-based number as text, e.g. "2".

        Raises InvalidChoiceError unless the answer is an integer in 1..len(options).
        """
        menu = formatting.choice_prompt(self._style(message, Level.PROMPT), options)
        answer = await self._reader(menu)
        try:
            index = int(answer.strip(), 10)
        except ValueError:
            raise InvalidChoiceError(answer) from None
        if index <= 0 or index > len(options):
            raise InvalidChoiceError(answer)
        return str(index)
