"""服务层包"""

from .train_loader import TrainLoader
from .train_service import TrainService

__all__ = ["TrainLoader", "TrainService"]
