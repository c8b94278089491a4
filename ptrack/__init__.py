"""ptrack — find every git project under a directory tree."""

from ptrack.errors import PtrackError, ScanError, SuitePreparationError
from ptrack.scanner import scan_directory

__version__ = "0.1.0"

__all__ = [
    "PtrackError",
    "ScanError",
    "SuitePreparationError",
    "__version__",
    "scan_directory",
]
