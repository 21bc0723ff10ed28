"""Tri-state decoration setting."""

from __future__ import annotations

from enum import Enum


class Decoration(Enum):
    """Decoration requested at construction time.

    ``AUTO`` defers the decision to the capability probe, which runs once when
    the output is built. ``ALWAYS`` and ``NEVER`` force the outcome.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def coerce(cls, value: Decoration | bool | None) -> Decoration:
        """Normalize a bool/None/Decoration value into a Decoration.

        Parameters
        ----------
        value : Decoration | bool | None
            ``None`` maps to AUTO, ``True`` to ALWAYS, ``False`` to NEVER

        Returns
        -------
        Decoration
            Normalized decoration setting

        Raises
        ------
        TypeError
            If ``value`` is of any other type
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.AUTO
        if isinstance(value, bool):
            return cls.ALWAYS if value else cls.NEVER
        msg = (
            "decorated must be a Decoration, bool or None, "
            f"got {type(value).__name__}"
        )
        raise TypeError(msg)

    @property
    def forced(self) -> bool | None:
        """Forced boolean value, or None when left to auto-detection."""
        if self is Decoration.AUTO:
            return None
        return self is Decoration.ALWAYS
