"""工具模块"""

from .logger import logger
from .dependency_checker import DependencyChecker, ensure_dependencies

__all__ = ["logger", "DependencyChecker", "ensure_dependencies"]
