"""Needleman-Wunsch edit distance over arbitrary sequences."""
from importlib.metadata import version, PackageNotFoundError

from .distance import distance, needleman_wunsch_distance

try:
    __version__ = version("nwdistance")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = ["__version__", "distance", "needleman_wunsch_distance"]
