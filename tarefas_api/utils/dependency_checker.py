"""依赖检查工具 - 启动时确认数据库可用"""
from typing import Optional, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from ..utils.logger import logger


class DependencyChecker:
    """依赖检查器"""
    
    @staticmethod
    def check_database(engine: Engine) -> Tuple[bool, Optional[str]]:
        """
        检查数据库是否可连接
        
        Returns:
            (is_available, error_message)
        """
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            return False, str(e)
        
        return True, None


def ensure_dependencies(engine: Engine):
    """
    强制检查所有依赖，失败则阻止启动
    
    Raises:
        RuntimeError: 数据库不可用
    """
    logger.info("Checking required dependencies...")
    
    ok, error = DependencyChecker.check_database(engine)
    if not ok:
        logger.error(f"✗ Database is not available: {error}")
        raise RuntimeError(f"Database is not available: {error}")
    
    logger.info(f"✓ Database reachable ({engine.url.render_as_string(hide_password=True)})")
