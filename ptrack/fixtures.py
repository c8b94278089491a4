"""Fixture trees for exercising the scanner against real directory layouts.

Fixture trees live in the ptrack repo itself, so their project markers are
stored as ``git-dir`` rather than ``.git`` (git refuses to track a nested
``.git`` directory). ``prepare_suite`` copies such a tree to a scratch
location and puts the real names back.
"""

from __future__ import annotations

import logging
import os
import shutil
import tempfile

from ptrack.errors import SuitePreparationError

logger = logging.getLogger(__name__)

MARKER_DIR = "git-dir"
TEMP_PREFIX = "ptrack-testsuite-"


def _collect_markers(tree: str) -> list[str]:
    """Return every ``git-dir`` directory under tree, deepest first."""
    markers: list[str] = []
    for dirpath, dirnames, _filenames in os.walk(tree, topdown=False):
        markers.extend(os.path.join(dirpath, d) for d in dirnames if d == MARKER_DIR)
    return markers


def prepare_suite(source: str | os.PathLike[str]) -> str:
    """Copy ``source`` into a fresh temp directory and rename markers to .git.

    Returns the path of the copy; the caller owns it and must remove it.
    On failure the temp directory is removed before SuitePreparationError
    is raised. If that removal fails as well, the error carries both.
    """
    source = os.fspath(source)
    try:
        temp_dir = tempfile.mkdtemp(prefix=TEMP_PREFIX)
    except OSError as exc:
        raise SuitePreparationError(source, "create temp dir", exc) from exc

    step = "copy reference suite"
    try:
        shutil.copytree(source, temp_dir, dirs_exist_ok=True)

        step = "rename git-dir markers"
        for marker in _collect_markers(temp_dir):
            os.rename(marker, os.path.join(os.path.dirname(marker), ".git"))
    except OSError as exc:
        try:
            shutil.rmtree(temp_dir)
        except OSError as cleanup_exc:
            raise SuitePreparationError(source, step, exc, cleanup_exc) from exc
        raise SuitePreparationError(source, step, exc) from exc

    logger.debug("prepared suite %s at %s", source, temp_dir)
    return temp_dir
