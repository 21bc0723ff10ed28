"""Verbosity level enum for stream output."""

from enum import IntEnum


class Verbosity(IntEnum):
    """Verbosity levels for stream output.

    Levels are ordered from least to most verbose:
    - QUIET: only messages written at QUIET level
    - NORMAL: default output
    - VERBOSE: + operation details
    """

    QUIET = 0
    NORMAL = 1
    VERBOSE = 2

    @classmethod
    def from_flags(
        cls,
        quiet: bool = False,
        verbose: bool = False,
    ) -> "Verbosity":
        """Create Verbosity from CLI flags.

        Parameters
        ----------
        quiet : bool
            Whether -q flag is set
        verbose : bool
            Whether -v flag is set

        Returns
        -------
        Verbosity
            Corresponding verbosity level (quiet wins over verbose)
        """
        if quiet:
            return cls.QUIET
        if verbose:
            return cls.VERBOSE
        return cls.NORMAL
