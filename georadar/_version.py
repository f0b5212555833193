"""
Version of georadar, read from the installed distribution or, in a source
checkout, from the VERSION file at the repository root
"""

__all__ = ['__version__']

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _source_version() -> Optional[str]:
    if not _VERSION_FILE.is_file():
        return None

    return _VERSION_FILE.read_text(encoding='utf-8').strip() or None


try:
    __version__ = version('georadar')
except PackageNotFoundError:
    __version__ = _source_version()
