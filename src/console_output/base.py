"""Abstract output with verbosity gating and formatting."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

import click

from console_output.protocol import Formatter
from console_output.verbosity import Verbosity


class PlainFormatter:
    """Formatter that leaves decorated text alone and strips ANSI otherwise."""

    def format(self, message: str, decorated: bool) -> str:
        """Return ``message``, without escape codes if not decorated."""
        if decorated:
            return message
        return click.unstyle(message)


class Output(ABC):
    """Base class for outputs.

    Subclasses only supply :meth:`do_write`, the raw line emission. The
    verbosity decision and formatting happen here.

    Parameters
    ----------
    verbosity : Verbosity
        Verbosity threshold
    decorated : bool
        Whether messages are decorated
    formatter : Formatter | None
        Message formatter (defaults to :class:`PlainFormatter`)
    """

    def __init__(
        self,
        verbosity: Verbosity = Verbosity.NORMAL,
        decorated: bool = False,
        formatter: Formatter | None = None,
    ) -> None:
        self._verbosity = Verbosity(verbosity)
        self._decorated = bool(decorated)
        self._formatter = formatter if formatter is not None else PlainFormatter()

    @property
    def verbosity(self) -> Verbosity:
        """Current verbosity level."""
        return self._verbosity

    @verbosity.setter
    def verbosity(self, level: Verbosity) -> None:
        self._verbosity = Verbosity(level)

    @property
    def decorated(self) -> bool:
        """Whether messages are decorated."""
        return self._decorated

    @property
    def formatter(self) -> Formatter:
        """Formatter applied to every message."""
        return self._formatter

    def write(
        self,
        messages: str | Iterable[str],
        level: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Write messages as lines when ``level`` is within the verbosity.

        Parameters
        ----------
        messages : str | Iterable[str]
            A message or an iterable of messages, written in order
        level : Verbosity
            Level the messages are written at
        """
        if self._verbosity < level:
            return

        if isinstance(messages, str):
            messages = [messages]

        for message in messages:
            self.do_write(self._formatter.format(message, self._decorated))

    @abstractmethod
    def do_write(self, message: str) -> None:
        """Write a single line to the output.

        Parameters
        ----------
        message : str
            Already formatted message, without line terminator
        """
