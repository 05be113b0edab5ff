"""查询请求和结果模型"""

from datetime import datetime
from enum import Enum
from typing import List
from pydantic import BaseModel, ConfigDict, Field

from .train import Train


class SortCriteria(str, Enum):
    """排序条件"""
    PRICE = "price"
    ARRIVAL_TIME = "arrival-time"
    DEPARTURE_TIME = "departure-time"

    @property
    def field_name(self) -> str:
        """对应的Train字段名"""
        return self.name.lower()


class TrainQuery(BaseModel):
    """校验后的车次查询"""
    model_config = ConfigDict(frozen=True)

    departure_station_id: int = Field(..., description="出发站ID")
    arrival_station_id: int = Field(..., description="到达站ID")
    criteria: SortCriteria = Field(..., description="排序条件")


class TrainSearchResult(BaseModel):
    """车次查询结果"""
    trains: List[Train] = Field(default_factory=list, description="车次列表")
    query_info: TrainQuery = Field(..., description="查询信息")
    search_date: datetime = Field(default_factory=datetime.now, description="查询时间")
    total: int = Field(0, description="截断前的匹配数量")
