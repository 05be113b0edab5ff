"""列车数据加载"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import aiofiles
from pydantic import ValidationError

from ..models.train import Train
from ..utils.config import Settings, get_settings
from ..utils.errors import DataFileReadError, DataParseError, TimeParseError

logger = logging.getLogger(__name__)


class TrainLoader:
    """从本地JSON文件读取列车数据"""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()

    async def load_trains(self, path: Optional[Union[str, Path]] = None) -> List[Train]:
        """
        读取整个数据文件并解析为车次列表。
        文件读取失败抛出DataFileReadError，JSON格式错误抛出DataParseError；
        单条记录不合法时记录警告并跳过。
        """
        path = Path(path) if path is not None else Path(self.settings.data_file)
        logger.debug(f"读取列车数据文件: {path}")
        try:
            async with aiofiles.open(path, mode="r", encoding="utf-8") as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise DataFileReadError(f"cannot read {path}: {e}") from e

        try:
            records = json.loads(content)
        except json.JSONDecodeError as e:
            raise DataParseError(f"invalid JSON in {path}: {e}") from e
        if not isinstance(records, list):
            raise DataParseError(f"expected a JSON array in {path}, got {type(records).__name__}")

        return self.parse_trains(records)

    def parse_trains(self, records: List[Any]) -> List[Train]:
        """解析车次记录，跳过不合法的记录"""
        context = {"time_format": self.settings.time_format}
        trains = []
        for index, record in enumerate(records):
            try:
                trains.append(Train.model_validate(record, context=context))
            except ValidationError as e:
                time_error = self._find_time_error(e)
                if time_error is not None:
                    logger.warning(f"时刻解析失败，跳过第{index}条记录: {time_error}")
                else:
                    logger.warning(f"记录字段异常，跳过第{index}条记录: {e}")
                continue
        logger.info(f"已加载{len(trains)}个车次（共{len(records)}条记录）")
        return trains

    @staticmethod
    def _find_time_error(error: ValidationError) -> Optional[TimeParseError]:
        for detail in error.errors():
            cause = detail.get("ctx", {}).get("error")
            if isinstance(cause, TimeParseError):
                return cause
        return None
