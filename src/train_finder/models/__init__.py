"""数据模型包"""

from .train import Train
from .query import SortCriteria, TrainQuery, TrainSearchResult

__all__ = [
    "Train",
    "SortCriteria",
    "TrainQuery",
    "TrainSearchResult",
]
