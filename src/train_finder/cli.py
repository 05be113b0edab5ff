"""命令行入口"""

import asyncio
import json
import logging
import sys
from typing import List, Optional, TextIO

from .models.train import Train
from .services.train_service import TrainService
from .utils.config import Settings, get_settings
from .utils.errors import DataLoadError, QueryValidationError

logger = logging.getLogger(__name__)

PROMPTS = (
    "Enter departure station:",
    "Enter arrival station:",
    "Enter criteria:",
)


def setup_logging(settings: Settings) -> None:
    """配置日志（输出到stderr）"""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )


def read_input(stream: TextIO) -> str:
    """读取一行输入并去掉行尾换行符"""
    line = stream.readline()
    if line == "":
        raise EOFError("unexpected end of input")
    return line.removesuffix("\n").removesuffix("\r")


def format_result(trains: List[Train], settings: Settings) -> str:
    """把车次列表序列化为JSON数组"""
    payload = [
        train.model_dump(mode="json", by_alias=True, context={"time_format": settings.time_format})
        for train in trains
    ]
    return json.dumps(payload, ensure_ascii=False)


def run(stdin: TextIO, stdout: TextIO, settings: Optional[Settings] = None) -> int:
    """交互式查询：读取三项输入，打印结果"""
    settings = settings or get_settings()
    answers = []
    for prompt in PROMPTS:
        print(prompt, file=stdout)
        try:
            answers.append(read_input(stdin))
        except EOFError as e:
            print("reading input failed", e, file=stdout)
            answers.append("")

    departure_station, arrival_station, criteria = answers
    service = TrainService(settings)
    trains: List[Train] = []
    try:
        result = asyncio.run(service.find_trains(departure_station, arrival_station, criteria))
        trains = result.trains
    except QueryValidationError as e:
        logger.info(f"查询参数无效: {e}")
        print(e, file=stdout)
    except DataLoadError as e:
        logger.error(f"读取列车数据失败: {e}")
        print(e, file=stdout)

    print("Result:", format_result(trains, settings), file=stdout)
    return 0


def main() -> None:
    """主函数"""
    settings = get_settings()
    setup_logging(settings)
    sys.exit(run(sys.stdin, sys.stdout, settings))


if __name__ == "__main__":
    main()
