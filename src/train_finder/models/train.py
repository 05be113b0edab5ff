"""列车数据模型"""

from datetime import time
from pydantic import BaseModel, ConfigDict, Field, SerializationInfo, ValidationInfo, field_serializer, field_validator

from ..utils.time_utils import DEFAULT_TIME_FORMAT, format_time_of_day, parse_time_of_day


def _time_format(info) -> str:
    context = info.context or {}
    return context.get("time_format", DEFAULT_TIME_FORMAT)


class Train(BaseModel):
    """列车信息模型

    JSON字段名使用驼峰形式（trainId、departureStationId等），
    时刻字段按校验上下文中的 ``time_format`` 解析和输出。
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    train_id: int = Field(..., alias="trainId", description="车次ID")
    departure_station_id: int = Field(..., alias="departureStationId", description="出发站ID")
    arrival_station_id: int = Field(..., alias="arrivalStationId", description="到达站ID")
    price: float = Field(..., description="票价")
    arrival_time: time = Field(..., alias="arrivalTime", description="到达时刻")
    departure_time: time = Field(..., alias="departureTime", description="出发时刻")

    @field_validator("arrival_time", "departure_time", mode="before")
    @classmethod
    def _parse_time(cls, value, info: ValidationInfo) -> time:
        return parse_time_of_day(value, _time_format(info))

    @field_serializer("arrival_time", "departure_time")
    def _format_time(self, value: time, info: SerializationInfo) -> str:
        return format_time_of_day(value, _time_format(info))
