# tower_vector/numeric/settings.py
import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from tower_vector.core.log import get_logger

log = get_logger(__name__)

TOLERANCE_ENV = "VECTOR_TOWER_TOLERANCE"
KERNEL_THRESHOLD_ENV = "VECTOR_TOWER_KERNEL_THRESHOLD"


@dataclass(frozen=True)
class NumericSettings:
    """
    Tunables for the numeric tower.

    tolerance: absolute tolerance used by ops.equals (and so by vector equality).
    kernel_threshold: minimum number of homogeneous float/complex terms before
        summation hands off to the compiled kernel.
    """
    tolerance: float = 1e-10
    kernel_threshold: int = 64


DEFAULTS = NumericSettings()

_active: Optional[NumericSettings] = None


def _coerce(name: str, raw: Any) -> Any:
    """Validates one setting. Returns None (after a warning) if unusable."""
    try:
        if name == "tolerance":
            value = float(raw)
            if value < 0 or value != value:
                raise ValueError("tolerance must be a non-negative number")
            return value
        if name == "kernel_threshold":
            value = int(raw)
            if value < 1:
                raise ValueError("kernel_threshold must be at least 1")
            return value
    except (TypeError, ValueError) as e:
        log.warning("Ignoring invalid setting %s=%r: %s", name, raw, e)
        return None
    return None


def _apply(base: NumericSettings, overrides: Dict[str, Any]) -> NumericSettings:
    known = {f.name for f in fields(NumericSettings)}
    changes = {}
    for name, raw in overrides.items():
        if name not in known:
            log.warning("Ignoring unknown setting %s", name)
            continue
        value = _coerce(name, raw)
        if value is not None:
            changes[name] = value
    return replace(base, **changes)


def settings_from_env(environ=None) -> NumericSettings:
    environ = os.environ if environ is None else environ
    overrides = {}
    if TOLERANCE_ENV in environ:
        overrides["tolerance"] = environ[TOLERANCE_ENV]
    if KERNEL_THRESHOLD_ENV in environ:
        overrides["kernel_threshold"] = environ[KERNEL_THRESHOLD_ENV]
    return _apply(DEFAULTS, overrides)


def load_settings(path: Union[str, os.PathLike]) -> NumericSettings:
    """
    Reads settings from a JSON object such as {"tolerance": 1e-9}.
    Returns the defaults if the file is missing or not a JSON object.
    """
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        log.warning("Could not read settings from %s: %s", p, e)
        return DEFAULTS
    if not isinstance(data, dict):
        log.warning("Settings file %s does not hold a JSON object", p)
        return DEFAULTS
    return _apply(DEFAULTS, data)


def get_settings() -> NumericSettings:
    global _active
    if _active is None:
        _active = settings_from_env()
    return _active


def configure(settings: Optional[NumericSettings] = None, **overrides) -> NumericSettings:
    """
    Replaces the active settings, either with a full NumericSettings or by
    overriding individual fields of the current ones.
    """
    global _active
    base = settings if settings is not None else get_settings()
    _active = _apply(base, overrides)
    log.debug("Numeric settings now %s", _active)
    return _active


def reset_settings() -> None:
    """Drops the active settings; the next get_settings() re-reads the environment."""
    global _active
    _active = None
