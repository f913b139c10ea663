from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (draca package directory)
_DRACA_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_STDLIB_DIRS = [_DRACA_DIR / 'stdlib']
_DEFAULT_RECURSION_LIMIT = 10_000
_DEFAULT_LOG_LEVEL = 'WARNING'

_TRUTHY = {'1', 'true', 'yes', 'on'}


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def get_stdlib_roots() -> List[Path]:
    return paths_from_env('DRACA_STDLIB_PATH', _DEFAULT_STDLIB_DIRS)


def unqualified_fallback_enabled() -> bool:
    return flag_from_env('DRACA_UNQUALIFIED_FALLBACK')


def get_recursion_limit() -> int:
    raw = os.environ.get('DRACA_RECURSION_LIMIT', '').strip()
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        return max(int(raw), 1000)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT


def get_log_level() -> str:
    return os.environ.get('DRACA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
