"""Environment variable readers."""

from __future__ import annotations

import os
from collections.abc import Mapping


def read_str(
    name: str,
    default: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Read a string environment variable.

    Unset and empty values are treated alike and yield ``default``.

    Parameters
    ----------
    name : str
        Variable name
    default : str | None
        Value returned when the variable is unset or empty
    environ : Mapping[str, str] | None
        Mapping to read from (defaults to ``os.environ``)

    Returns
    -------
    str | None
        Variable value or default
    """
    source = os.environ if environ is None else environ
    value = source.get(name)
    if not value:
        return default
    return value
