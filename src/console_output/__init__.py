"""Stream-backed console output with verbosity gating.

Lines written through an output reach its stream only when the output's
verbosity is at least the level they are written at:

========  =========  ==================================
Level     Flag       User Sees
========  =========  ==================================
QUIET     -q         Only messages written at QUIET
NORMAL    (default)  + regular output
VERBOSE   -v         + operation details
========  =========  ==================================

Decoration defaults to on for interactive terminals and off for files,
pipes and Windows consoles without ANSICON.

Usage
-----
>>> import io
>>> from console_output import StreamOutput, Verbosity
>>>
>>> output = StreamOutput(io.BytesIO(), decorated=False)
>>> output.write("Build complete")
>>> output.write("Additional details...", Verbosity.VERBOSE)  # Only shown with -v
"""

from console_output.base import Output, PlainFormatter
from console_output.capability import has_color_support
from console_output.console import ConsoleOutput
from console_output.decoration import Decoration
from console_output.errors import InvalidStreamError, OutputError, OutputWriteError
from console_output.protocol import Formatter, OutputProtocol
from console_output.stream import StreamOutput
from console_output.verbosity import Verbosity

__all__ = [
    "ConsoleOutput",
    "Decoration",
    "Formatter",
    "InvalidStreamError",
    "Output",
    "OutputError",
    "OutputProtocol",
    "OutputWriteError",
    "PlainFormatter",
    "StreamOutput",
    "Verbosity",
    "has_color_support",
]
