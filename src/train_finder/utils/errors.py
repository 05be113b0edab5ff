"""异常定义"""


class TrainFinderError(Exception):
    """所有查询相关异常的基类"""


class QueryValidationError(TrainFinderError, ValueError):
    """查询参数校验失败"""


class EmptyInputError(QueryValidationError):
    """车站输入为空"""


class InvalidStationIdError(QueryValidationError):
    """车站ID不是整数"""


class UnsupportedCriteriaError(QueryValidationError):
    """不支持的排序条件"""


class DataLoadError(TrainFinderError):
    """列车数据加载失败"""


class DataFileReadError(DataLoadError):
    """数据文件无法读取"""


class DataParseError(DataLoadError):
    """数据文件不是合法的JSON数组"""


class TimeParseError(DataLoadError, ValueError):
    """时刻字符串无法解析"""
