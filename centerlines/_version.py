"""
Exposes the version of centerlines, from the installed distribution's metadata
or, in a source checkout, from the repository's VERSION file
"""
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'

try:
    __version__ = version('centerlines')
except PackageNotFoundError:
    __version__ = VERSION_FILE.read_text(encoding='utf-8').strip() if VERSION_FILE.exists() else None

__all__ = ['__version__']
