"""配置管理"""

import logging
from typing import Optional
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """应用配置"""
    data_file: Path = Field(default=Path("./data.json"), description="列车数据文件路径")
    time_format: str = Field(default="%H:%M:%S", description="时刻字段格式")
    result_limit: int = Field(default=3, ge=0, description="最多返回的车次数量")
    strict_load: bool = Field(default=False, description="数据加载失败时是否中止查询")
    debug: bool = Field(default=False, description="调试模式")
    log_level: str = Field(default="WARNING", description="日志级别")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """获取配置实例"""
    global _settings
    if _settings is None:
        env_file_path = Path(".env")
        if not env_file_path.exists():
            logger.debug(f"环境配置文件 {env_file_path.absolute()} 不存在，使用默认配置")
        else:
            logger.info(f"加载环境配置文件: {env_file_path.absolute()}")

        try:
            _settings = Settings()
            logger.info(f"配置加载成功 - 数据文件: {_settings.data_file}, 时刻格式: {_settings.time_format}, 结果数量: {_settings.result_limit}, 日志级别: {_settings.log_level}")
        except Exception as e:
            logger.error(f"配置加载失败: {e}，使用默认配置")
            _settings = Settings.model_construct()

    return _settings


def reset_settings() -> None:
    """清除缓存的配置实例"""
    global _settings
    _settings = None
