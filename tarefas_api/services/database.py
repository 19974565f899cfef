"""数据库连接管理"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ..models.orm import Base
from ..utils.logger import logger


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    创建数据库引擎
    
    SQLite 需要关闭同线程检查（请求在线程池中处理），
    内存数据库还需要共享同一个连接，否则每个连接都是一个空库。
    """
    kwargs = {"echo": echo, "pool_pre_ping": True}
    
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    
    return create_engine(database_url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """创建会话工厂"""
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """创建缺失的表"""
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready")
