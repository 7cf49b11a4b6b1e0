"""
Core domain layer: records, dataset abstraction, selection state
and the explorer state object
"""

from .dataset import Dataset
from .record import Record
from .selection import ALL_YEARS, Selection
from .state import ExplorerState, ViewMode

__all__ = ["ALL_YEARS", "Dataset", "ExplorerState", "Record", "Selection", "ViewMode"]
