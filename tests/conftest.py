import os
import shutil

import pytest

from ptrack.fixtures import prepare_suite

REFERENCE_SUITE = os.path.join(os.path.dirname(__file__), "fixtures", "reference-suite")


@pytest.fixture
def reference_suite():
    """A writable copy of the reference suite with real .git directories."""
    path = prepare_suite(REFERENCE_SUITE)
    yield path
    shutil.rmtree(path)
