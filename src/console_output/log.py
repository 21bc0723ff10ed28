"""Logger factory for the console_output package."""

import logging

ROOT_LOGGER_NAME = "console_output"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace.

    Parameters
    ----------
    name : str
        Module name, usually ``__name__``

    Returns
    -------
    logging.Logger
        Logger nested under ``console_output``
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
