"""车次查询服务"""

import logging
import re
from typing import List, Optional

from ..models.query import SortCriteria, TrainQuery, TrainSearchResult
from ..models.train import Train
from ..utils.config import Settings, get_settings
from ..utils.errors import DataLoadError, EmptyInputError, InvalidStationIdError, UnsupportedCriteriaError
from .train_loader import TrainLoader

logger = logging.getLogger(__name__)

STATION_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


class TrainService:
    """车次查询服务：校验 → 加载 → 过滤 → 排序 → 截断"""

    def __init__(self, settings: Optional[Settings] = None, loader: Optional[TrainLoader] = None):
        self.settings = settings or get_settings()
        self.loader = loader or TrainLoader(self.settings)

    def validate_query(self, departure_station: str, arrival_station: str, criteria: str) -> TrainQuery:
        """校验原始输入，遇到第一个错误即抛出"""
        if departure_station == "":
            raise EmptyInputError("empty departure station")
        if arrival_station == "":
            raise EmptyInputError("empty arrival station")
        try:
            sort_criteria = SortCriteria(criteria)
        except ValueError:
            raise UnsupportedCriteriaError("unsupported criteria")
        if not STATION_ID_PATTERN.fullmatch(departure_station):
            raise InvalidStationIdError("bad departure station input")
        if not STATION_ID_PATTERN.fullmatch(arrival_station):
            raise InvalidStationIdError("bad arrival station input")

        return TrainQuery(
            departure_station_id=int(departure_station),
            arrival_station_id=int(arrival_station),
            criteria=sort_criteria
        )

    async def load_trains(self) -> List[Train]:
        """加载车次数据；非严格模式下加载失败时返回空列表"""
        try:
            return await self.loader.load_trains()
        except DataLoadError as e:
            if self.settings.strict_load:
                raise
            logger.error(f"读取列车数据失败: {e}")
            return []

    @staticmethod
    def filter_trains(trains: List[Train], departure_station_id: int, arrival_station_id: int) -> List[Train]:
        """保留出发站和到达站都精确匹配的车次，保持原有顺序"""
        return [
            train for train in trains
            if train.departure_station_id == departure_station_id
            and train.arrival_station_id == arrival_station_id
        ]

    @staticmethod
    def sort_trains(trains: List[Train], criteria: SortCriteria) -> List[Train]:
        """按排序条件升序排列"""
        field_name = SortCriteria(criteria).field_name
        return sorted(trains, key=lambda train: getattr(train, field_name))

    async def find_trains(self, departure_station: str, arrival_station: str, criteria: str) -> TrainSearchResult:
        """查询车次"""
        query = self.validate_query(departure_station, arrival_station, criteria)
        logger.info(f"查询参数: {query.departure_station_id} → {query.arrival_station_id} (排序: {query.criteria.value})")

        trains = await self.load_trains()
        matched = self.filter_trains(trains, query.departure_station_id, query.arrival_station_id)
        ordered = self.sort_trains(matched, query.criteria)
        limited = ordered[:self.settings.result_limit]
        logger.info(f"匹配{len(matched)}个车次，返回{len(limited)}个")

        return TrainSearchResult(
            trains=limited,
            query_info=query,
            total=len(matched)
        )
