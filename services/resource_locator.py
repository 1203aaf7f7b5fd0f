"""Resolve on-disk resources (dataset, templates, static assets).

The app can be started from the project root, a sub-directory, or an
installed location, so every lookup walks a fixed list of candidates and
reports what it tried.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_DIR = Path(__file__).resolve().parents[1]
MAX_PARENT_LEVELS = 6


class ResourceLocator:
    """Ordered fallback search rooted at ``base_dir`` (cwd by default)."""

    def __init__(self, base_dir: str | os.PathLike | None = None, fallback_dir: str | os.PathLike | None = PROJECT_DIR):
        self.base_dir = Path(base_dir) if base_dir is not None else None
        self.fallback_dir = Path(fallback_dir) if fallback_dir is not None else None

    def _root(self) -> Path:
        return self.base_dir if self.base_dir is not None else Path.cwd()

    def file_candidates(self, relative: str | os.PathLike) -> list[str]:
        """Candidate paths for ``relative``: as given, ./, ../, ../../, then the fallback dir.

        An absolute path is its own single candidate; no prefixes or fallback apply.
        """
        rel = os.fspath(relative)
        if os.path.isabs(rel):
            return [rel]
        root = os.fspath(self.base_dir) if self.base_dir is not None else ""
        candidates = [os.path.join(root, prefix + rel) for prefix in ("", "./", "../", "../../")]
        if self.fallback_dir is not None:
            candidates.append(os.path.join(os.fspath(self.fallback_dir), rel))
        return candidates

    def find_dir(self, relative: str | os.PathLike, max_levels: int = MAX_PARENT_LEVELS) -> Path | None:
        """Walk up from the root looking for ``relative`` as a directory."""
        rel = Path(relative)
        if rel.is_absolute():
            return rel if rel.is_dir() else None
        current = self._root().resolve()
        for _ in range(max_levels):
            candidate = current / rel
            if candidate.is_dir():
                return candidate
            if current.parent == current:
                break
            current = current.parent
        if self.fallback_dir is not None:
            candidate = self.fallback_dir / rel
            if candidate.is_dir():
                return candidate
        logger.debug("Directory %s not found from %s", rel, self._root())
        return None


default_locator = ResourceLocator()

__all__ = ["ResourceLocator", "default_locator", "PROJECT_DIR"]
