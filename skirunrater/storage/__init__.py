"""Storage package for SkiRunRater.

``from skirunrater.storage import SkiRunRepository`` is the usual entry point;
the XML codec lives in ``storage/xml_file.py``.
"""

from .repository import SkiRunRepository, StoreDisposedError
from .xml_file import RunFileFormatError, create_empty, read_runs, write_runs

__all__ = [
    "SkiRunRepository",
    "StoreDisposedError",
    "RunFileFormatError",
    "create_empty",
    "read_runs",
    "write_runs",
]
