from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from draca.config import get_stdlib_roots
from draca.errors import DracaError

logger = logging.getLogger(__name__)


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


STDLIB_SUFFIX = ".dr"


def stdlib_files() -> list[Path]:
    """Every *.dr file under the stdlib roots, root by root, in sorted order."""
    files: list[Path] = []
    for root in get_stdlib_roots():
        if not root.is_dir():
            logger.warning("stdlib root %s is not a directory", root)
            continue
        files.extend(sorted(root.rglob(f"*{STDLIB_SUFFIX}")))
    return files


def load_stdlib(itp: _HasEvalPrelude) -> int:
    """Evaluate the standard library into the interpreter; returns the number of files loaded.

    A broken stdlib file is logged and skipped so the interpreter still starts.
    """
    loaded = 0
    for path in stdlib_files():
        try:
            itp.eval_prelude(path.read_text(encoding="utf-8"))
        except DracaError as e:
            logger.warning("stdlib file %s failed to load: %s", path, e)
            continue
        logger.debug("loaded stdlib file %s", path)
        loaded += 1
    logger.info("standard library: %d file(s) loaded", loaded)
    return loaded
