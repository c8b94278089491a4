"""Project discovery — find every directory that holds a .git directory."""

from __future__ import annotations

import logging
import os
import stat

from ptrack.errors import ScanError

logger = logging.getLogger(__name__)

GIT_DIR = ".git"


def scan_directory(root: str | os.PathLike[str]) -> list[str]:
    """Recursively find all git project paths under root.

    Walks depth-first; symlinks below root are not followed. Each
    directory named ``.git`` adds its parent to the result and is not
    descended into. Every other directory is walked, so nested projects
    (submodules, vendored checkouts) are found too. The root obeys the
    same rule, so scanning ``x/.git`` itself yields ``x``.

    Paths are joined onto root as given. Entries within a directory are
    visited in name order, but the result is walk order, not sorted order:
    sort it if you need a stable listing.

    Raises ScanError on the first filesystem error. No partial result is
    returned in that case.
    """
    root = os.fspath(root)
    projects: list[str] = []

    def _walk(path: str, name: str) -> None:
        # Explicit stack: tree depth is not bounded by the recursion limit
        pending = [(path, name)]
        while pending:
            path, name = pending.pop()
            if name == GIT_DIR:
                projects.append(os.path.dirname(path) or os.curdir)
                logger.debug("found project %s", projects[-1])
                continue

            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)

            # Reversed so the smallest name is popped first (pre-order)
            pending.extend(
                (entry.path, entry.name)
                for entry in reversed(entries)
                if entry.is_dir(follow_symlinks=False)
            )

    try:
        st = os.stat(root)
        if stat.S_ISDIR(st.st_mode):
            start = root.rstrip(os.sep) or root
            _walk(start, os.path.basename(start))
    except OSError as exc:
        raise ScanError(root, exc.filename or root, exc) from exc

    logger.debug("scanned %s: %d projects", root, len(projects))
    return projects
