"""
Process environment entry point.

Takes a snapshot of os.environ (optionally layered over a .env file) and
hands it to from_mapping(). Values already set in the process environment
win over the file, and os.environ itself is never modified.
"""

import logging
import os
from typing import Dict, Optional, Type, TypeVar, Union

from dotenv import dotenv_values

from envrecord.options import EnvOptions
from envrecord.resolver import from_mapping

logger = logging.getLogger(__name__)

T = TypeVar('T')

PathLike = Union[str, os.PathLike]


def snapshot(env_file: Optional[PathLike] = None) -> Dict[str, str]:
    """Copy the current environment into a plain dict."""
    env: Dict[str, str] = {}
    if env_file is not None:
        # keys declared without "=" come back as None
        file_values = dotenv_values(env_file)
        env.update({k: v for k, v in file_values.items() if v is not None})
        logger.debug("Loaded %d variables from %s", len(env), env_file)
    env.update(os.environ)
    return env


def parse(
    record_type: Type[T],
    options: Optional[EnvOptions] = None,
    env_file: Optional[PathLike] = None,
) -> T:
    """
    Parse the process environment into record_type.

    Example:
        config = parse(MyConfig, EnvOptions(prefix="MY_APP_"))
    """
    env = snapshot(env_file)
    try:
        return from_mapping(record_type, env, options)
    finally:
        env.clear()


__all__ = ['snapshot', 'parse']
