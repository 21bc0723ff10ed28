"""Output bound to the process standard streams."""

from __future__ import annotations

import sys

import click

from console_output.constants import DEFAULT_ENCODING
from console_output.decoration import Decoration
from console_output.protocol import Formatter
from console_output.stream import StreamOutput
from console_output.verbosity import Verbosity


class ConsoleOutput(StreamOutput):
    """StreamOutput writing to standard output (or standard error).

    The standard stream is looked up when the output is built, so a later
    replacement of ``sys.stdout`` is not followed. A replacement without a
    binary ``buffer`` raises :class:`InvalidStreamError`.

    Parameters
    ----------
    verbosity : Verbosity
        Verbosity threshold
    decorated : Decoration | bool | None
        Whether to decorate messages (AUTO/None probes the stream once)
    err : bool
        Write to stderr instead of stdout
    formatter : Formatter | None
        Message formatter
    """

    def __init__(
        self,
        verbosity: Verbosity = Verbosity.NORMAL,
        decorated: Decoration | bool | None = Decoration.AUTO,
        *,
        err: bool = False,
        formatter: Formatter | None = None,
    ) -> None:
        text_stream = sys.stderr if err else sys.stdout
        super().__init__(
            getattr(text_stream, "buffer", text_stream),
            verbosity,
            decorated,
            formatter=formatter,
            encoding=getattr(text_stream, "encoding", None) or DEFAULT_ENCODING,
            errors=getattr(text_stream, "errors", None) or "strict",
        )

    @classmethod
    def from_click_context(
        cls,
        ctx: click.Context,
        err: bool = False,
    ) -> ConsoleOutput:
        """Create ConsoleOutput from Click context.

        Parameters
        ----------
        ctx : click.Context
            Click context whose ``obj`` may carry ``quiet``/``verbose`` flags
        err : bool
            Write to stderr instead of stdout

        Returns
        -------
        ConsoleOutput
            Output configured from context
        """
        obj = ctx.obj
        quiet = getattr(obj, "quiet", False) if obj else False
        verbose = getattr(obj, "verbose", False) if obj else False
        verbosity = Verbosity.from_flags(quiet=bool(quiet), verbose=bool(verbose))
        return cls(verbosity=verbosity, err=err)
