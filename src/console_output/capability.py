"""Terminal capability probe used to decide default decoration."""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from typing import IO, Any

from console_output.constants import WINDOWS_PATH_SEPARATOR, EnvVars
from console_output.env import read_str
from console_output.log import get_logger

logger = get_logger(__name__)

IsAtty = Callable[[int], bool]

_DEFAULT_ISATTY: IsAtty | None = getattr(os, "isatty", None)


def has_color_support(
    stream: IO[Any],
    *,
    path_sep: str = os.sep,
    environ: Mapping[str, str] | None = None,
    isatty: IsAtty | None = _DEFAULT_ISATTY,
) -> bool:
    """Return whether ``stream`` can display ANSI decoration.

    Decoration is disabled when the stream does not support it:

    - Windows consoles without ANSICON
    - streams that are not interactive terminals (files, pipes)

    Parameters
    ----------
    stream : IO[Any]
        Stream to probe
    path_sep : str
        Platform path separator; a backslash selects the Windows rule
    environ : Mapping[str, str] | None
        Environment to read ANSICON from (defaults to ``os.environ``)
    isatty : Callable[[int], bool] | None
        File-descriptor terminal check; None when the platform lacks one

    Returns
    -------
    bool
        True if the stream supports decoration
    """
    if path_sep == WINDOWS_PATH_SEPARATOR:
        supported = read_str(EnvVars.ANSICON, environ=environ) is not None
        logger.debug("Color support %s: %s check", supported, EnvVars.ANSICON)
        return supported

    if isatty is None:
        logger.debug("Color support disabled: no isatty on this platform")
        return False

    try:
        fd = stream.fileno()
    except (OSError, ValueError):
        # in-memory or closed streams have no descriptor
        logger.debug("Color support disabled: stream has no file descriptor")
        return False

    try:
        supported = bool(isatty(fd))
    except OSError:
        supported = False
    logger.debug("Color support %s: isatty(%d)", supported, fd)
    return supported
