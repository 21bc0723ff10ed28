"""Constants for stream output."""

import os

# Appended once to every line written by a StreamOutput
LINE_TERMINATOR = os.linesep

DEFAULT_ENCODING = "utf-8"

WINDOWS_PATH_SEPARATOR = "\\"


class EnvVars:
    """Environment variable names."""

    # Set by the ANSICON console hook on Windows
    ANSICON = "ANSICON"
