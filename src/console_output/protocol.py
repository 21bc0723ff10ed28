"""Protocol definitions for outputs and formatters (for testing/mocking)."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

from console_output.verbosity import Verbosity


@runtime_checkable
class Formatter(Protocol):
    """Turns a message into the text handed to ``do_write``."""

    def format(self, message: str, decorated: bool) -> str:
        """Format a message for an output that is (or isn't) decorated."""
        ...


@runtime_checkable
class OutputProtocol(Protocol):
    """Protocol for verbosity-gated outputs.

    | Written at | QUIET | NORMAL | VERBOSE |
    |------------|-------|--------|---------|
    | QUIET      | Yes   | Yes    | Yes     |
    | NORMAL     | No    | Yes    | Yes     |
    | VERBOSE    | No    | No     | Yes     |

    Columns are the output's configured verbosity.
    """

    @property
    def verbosity(self) -> Verbosity:
        """Current verbosity level."""
        ...

    @property
    def decorated(self) -> bool:
        """Whether messages are decorated."""
        ...

    def write(
        self,
        messages: str | Iterable[str],
        level: Verbosity = Verbosity.NORMAL,
    ) -> None:
        """Write one or more lines if ``level`` passes the verbosity threshold."""
        ...
