from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Callable, Optional, TypeVar

from pigment.types.errors import PigmentConfigError

T = TypeVar("T")

# Defaults
DEFAULT_MAX_STEPS: Optional[int] = None
DEFAULT_MAX_DEPTH = 100
DEFAULT_TIMEOUT: Optional[float] = None
DEFAULT_MAX_NESTING = 128


@dataclass(frozen=True)
class Limits:
    """Bounds on a single run.

    max_steps   loop iterations plus function calls; None means unbounded
    max_depth   nested user-function calls
    timeout     wall-clock seconds; None means unbounded
    max_nesting bracket nesting accepted by the parser
    """

    max_steps: Optional[int] = DEFAULT_MAX_STEPS
    max_depth: int = DEFAULT_MAX_DEPTH
    timeout: Optional[float] = DEFAULT_TIMEOUT
    max_nesting: int = DEFAULT_MAX_NESTING


def value_from_env(var: str, convert: Callable[[str], T], default: T) -> T:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = convert(raw.strip())
    except ValueError:
        raise PigmentConfigError(f"{var} must be a number, got {raw!r}") from None
    if value <= 0:
        raise PigmentConfigError(f"{var} must be positive, got {raw!r}")
    return value


def get_limits() -> Limits:
    """Limits from PIGMENT_* environment variables, falling back to defaults."""
    return Limits(
        max_steps=value_from_env("PIGMENT_MAX_STEPS", int, DEFAULT_MAX_STEPS),
        max_depth=value_from_env("PIGMENT_MAX_DEPTH", int, DEFAULT_MAX_DEPTH),
        timeout=value_from_env("PIGMENT_TIMEOUT", float, DEFAULT_TIMEOUT),
        max_nesting=value_from_env("PIGMENT_MAX_NESTING", int, DEFAULT_MAX_NESTING),
    )
