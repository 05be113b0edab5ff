"""启动车次查询脚本"""

import sys
import logging
from pathlib import Path

# 添加项目根目录到Python路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

# 配置日志
logging.basicConfig(
    level=logging.WARNING,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def check_environment():
    """检查运行环境"""
    logger.info("检查运行环境...")

    # 检查Python版本
    if sys.version_info < (3, 10):
        logger.error(f"Python版本过低: {sys.version_info}，需要Python 3.10+")
        return False

    try:
        # 检查必要的包
        import aiofiles
        import pydantic
        import pydantic_settings
        logger.info("✅ 所有必要包已安装")
        return True
    except ImportError as e:
        logger.error(f"❌ 缺少必要包: {e}")
        logger.error("请运行: pip install -e .")
        return False


def main():
    """主函数"""
    if not check_environment():
        sys.exit(1)

    from train_finder.cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()
