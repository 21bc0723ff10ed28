"""Output that writes lines to a byte stream."""

from __future__ import annotations

import io
from typing import IO, Any

from console_output.base import Output
from console_output.capability import has_color_support
from console_output.constants import DEFAULT_ENCODING, LINE_TERMINATOR
from console_output.decoration import Decoration
from console_output.errors import InvalidStreamError, OutputWriteError
from console_output.log import get_logger
from console_output.protocol import Formatter
from console_output.verbosity import Verbosity

logger = get_logger(__name__)


class StreamOutput(Output):
    """Writes output lines to a given byte stream.

    Any writable binary stream works, for example standard output::

        output = StreamOutput(sys.stdout.buffer)

    or a file opened for appending::

        output = StreamOutput(open("output.log", "ab"))

    The stream is borrowed: StreamOutput writes to it but never closes it.

    Parameters
    ----------
    stream : IO[bytes]
        Open, writable binary stream
    verbosity : Verbosity
        Verbosity threshold
    decorated : Decoration | bool | None
        Whether to decorate messages (AUTO/None probes the stream once)
    formatter : Formatter | None
        Message formatter
    encoding : str
        Encoding used to turn messages into bytes
    errors : str
        Codec error handler for unencodable text (see :meth:`str.encode`)

    Raises
    ------
    InvalidStreamError
        If ``stream`` is not an open, writable binary stream
    """

    def __init__(
        self,
        stream: IO[bytes],
        verbosity: Verbosity = Verbosity.NORMAL,
        decorated: Decoration | bool | None = Decoration.AUTO,
        *,
        formatter: Formatter | None = None,
        encoding: str = DEFAULT_ENCODING,
        errors: str = "strict",
    ) -> None:
        self._check_stream(stream)
        self._stream = stream
        self._encoding = encoding
        self._errors = errors

        resolved = Decoration.coerce(decorated).forced
        if resolved is None:
            resolved = self.has_color_support()

        super().__init__(verbosity, resolved, formatter)

    @property
    def stream(self) -> IO[bytes]:
        """Stream attached to this output."""
        return self._stream

    @property
    def encoding(self) -> str:
        """Encoding used for written messages."""
        return self._encoding

    @property
    def errors(self) -> str:
        """Error handler used when encoding messages."""
        return self._errors

    def do_write(self, message: str) -> None:
        """Write a message and a line terminator in one call, then flush.

        Parameters
        ----------
        message : str
            Message to write

        Raises
        ------
        OutputWriteError
            If the message cannot be encoded, or the stream rejects the
            write or the flush. After a short write the bytes the stream
            accepted stay delivered, so the line may be partly written.
        """
        try:
            data = f"{message}{LINE_TERMINATOR}".encode(self._encoding, self._errors)
            written = self._stream.write(data)
            self._stream.flush()
        except (OSError, ValueError) as e:
            logger.debug("Write to %r failed: %s", self._stream, e)
            msg = f"Unable to write output: {e}"
            raise OutputWriteError(msg) from e

        # Raw streams report short writes instead of raising
        if written is None or written < len(data):
            msg = f"Unable to write output: wrote {written} of {len(data)} bytes"
            raise OutputWriteError(msg)

    def has_color_support(self) -> bool:
        """Return whether the stream supports decoration.

        Returns
        -------
        bool
            Result of the capability probe for this stream
        """
        return has_color_support(self._stream)

    @staticmethod
    def _check_stream(stream: Any) -> None:
        """Validate that ``stream`` is an open, writable binary stream."""
        if not isinstance(stream, io.IOBase) or isinstance(stream, io.TextIOBase):
            logger.debug("Rejected stream of type %s", type(stream).__name__)
            msg = (
                "StreamOutput needs a binary stream as its first argument, "
                f"got {type(stream).__name__}"
            )
            raise InvalidStreamError(msg)

        if stream.closed or not stream.writable():
            logger.debug("Rejected closed or read-only stream %r", stream)
            msg = "StreamOutput needs an open, writable stream"
            raise InvalidStreamError(msg)
