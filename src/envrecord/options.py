"""Per-call options for environment parsing."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvOptions:
    """
    Options controlling how field names map to environment variables.

    Attributes:
        prefix: Prepended verbatim to every upper-cased field name,
            e.g. ``EnvOptions(prefix="MY_APP_")`` makes field ``port``
            read ``MY_APP_PORT``.
    """
    prefix: str = ""


__all__ = ['EnvOptions']
