"""Runtime settings for the spell checker.

Env (a ``.env`` file in the working directory is honoured):
  WORDMATCH_DICTIONARY         dictionary file (default: dictionary.txt)
  WORDMATCH_CAPACITY           initial bucket count (default: 1000)
  WORDMATCH_SUGGESTIONS        suggestions per misspelled word (default: 5)
  WORDMATCH_HASH_FUNCTION      1/sum or 2/weighted (default: 1)
  WORDMATCH_PERSIST_DISTANCES  store distances in the table (default: false)
  WORDMATCH_LOG_LEVEL          logging level name (default: WARNING)
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .hash_map import HASH_FUNCTIONS

DEFAULT_DICTIONARY = "dictionary.txt"
DEFAULT_CAPACITY = 1000
DEFAULT_SUGGESTIONS = 5

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    dictionary: str = DEFAULT_DICTIONARY
    capacity: int = DEFAULT_CAPACITY
    suggestions: int = DEFAULT_SUGGESTIONS
    hash_function: str = "1"
    persist_distances: bool = False
    log_level: str = "WARNING"


def _int_setting(env: Mapping[str, str], name: str, default: int, minimum: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ConfigError(f"{name} must be >= {minimum}, got {value}")
    return value


def _bool_setting(env: Mapping[str, str], name: str, default: bool) -> bool:
    raw = env.get(name)
    if raw is None:
        return default
    v = raw.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        env: Mapping to read instead of os.environ (no .env loading then)

    Raises:
        ConfigError: for values that cannot be used
    """
    if env is None:
        load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    hash_function = env.get("WORDMATCH_HASH_FUNCTION", "1").strip().lower() or "1"
    if hash_function not in HASH_FUNCTIONS:
        raise ConfigError(f"WORDMATCH_HASH_FUNCTION: unknown hash function {hash_function!r}")

    log_level = env.get("WORDMATCH_LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"WORDMATCH_LOG_LEVEL: unknown level {log_level!r}")

    return Settings(
        dictionary=env.get("WORDMATCH_DICTIONARY", DEFAULT_DICTIONARY) or DEFAULT_DICTIONARY,
        capacity=_int_setting(env, "WORDMATCH_CAPACITY", DEFAULT_CAPACITY, minimum=1),
        suggestions=_int_setting(env, "WORDMATCH_SUGGESTIONS", DEFAULT_SUGGESTIONS, minimum=0),
        hash_function=hash_function,
        persist_distances=_bool_setting(env, "WORDMATCH_PERSIST_DISTANCES", False),
        log_level=log_level,
    )
