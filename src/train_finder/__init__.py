"""按出发站/到达站查询并排序本地车次数据"""

from .models import SortCriteria, Train, TrainQuery, TrainSearchResult
from .services import TrainLoader, TrainService

__version__ = "1.0.0"

__all__ = [
    "SortCriteria",
    "Train",
    "TrainQuery",
    "TrainSearchResult",
    "TrainLoader",
    "TrainService",
]
