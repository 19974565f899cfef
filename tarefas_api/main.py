"""Tarefas API 主应用"""
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError
from starlette.exceptions import HTTPException as StarletteHTTPException
import time

from .config import Settings, settings as default_settings, ensure_directories
from .constants import ErrorCode
from .middleware.cors import CorsPolicyMiddleware
from .utils.logger import logger, setup_logger
from .utils.dependency_checker import DependencyChecker, ensure_dependencies
from .services.database import create_db_engine, create_session_factory, init_db
from .services.tarefa_repository import TarefaRepository
from .services.tarefa_service import TarefaService, InvalidTarefaError
from .routers import tarefas


# 启动和关闭事件
@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    config: Settings = app.state.settings
    engine = app.state.engine
    
    # 启动
    logger.info("=" * 60)
    logger.info(f"Starting {config.APP_NAME} v{config.VERSION}")
    logger.info("=" * 60)
    
    # 确保目录存在
    ensure_directories(config)
    
    # 先确认数据库可用，再建表
    ensure_dependencies(engine)
    init_db(engine)
    
    policy = app.state.cors_policy
    logger.info(
        f"CORS enabled for {policy.path_prefix} "
        f"- origins: {', '.join(policy.allowed_origins)}"
    )
    
    logger.info("=" * 60)
    logger.info("✓ Application started successfully")
    logger.info("=" * 60)
    
    yield
    
    # 关闭
    logger.info("Shutting down application")
    engine.dispose()
    logger.info("Application stopped")


_HTTP_ERROR_CODES = {
    404: ErrorCode.NOT_FOUND,
    405: ErrorCode.METHOD_NOT_ALLOWED,
}


def _error_body(error_code: str, error_message: str, error_details=None) -> dict:
    return {
        "error_code": error_code,
        "error_message": error_message,
        "error_details": error_details
    }


def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    创建 FastAPI 应用
    
    Args:
        config: 应用配置，默认使用全局配置
        
    Returns:
        装配好存储、服务与中间件的应用
    """
    config = config or default_settings
    
    # 按注入的配置重新配置日志
    setup_logger(config=config, force=True)
    
    app = FastAPI(
        title=config.APP_NAME,
        version=config.VERSION,
        description="任务管理 REST API - 为前端提供任务的列表、创建与删除",
        lifespan=lifespan
    )
    
    # 构造注入：存储 -> 服务
    engine = create_db_engine(config.DATABASE_URL, echo=config.DATABASE_ECHO)
    repository = TarefaRepository(create_session_factory(engine))
    
    app.state.settings = config
    app.state.engine = engine
    app.state.tarefa_service = TarefaService(repository)
    app.state.cors_policy = config.cors_policy()
    
    # CORS 中间件（仅作用于任务路径）
    app.add_middleware(CorsPolicyMiddleware, policy=app.state.cors_policy)
    
    # 请求日志中间件
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """记录请求日志"""
        start_time = time.time()
        
        response = await call_next(request)
        
        process_time = time.time() - start_time
        
        logger.info(
            f"{request.method} {request.url.path} "
            f"- {response.status_code} "
            f"- {process_time:.3f}s"
        )
        
        return response
    
    # HTTP 异常：detail 为字典时直接作为响应体
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if isinstance(exc.detail, dict) and "error_code" in exc.detail:
            content = _error_body(
                exc.detail["error_code"],
                exc.detail.get("error_message", ""),
                exc.detail.get("error_details")
            )
        else:
            content = _error_body(
                _HTTP_ERROR_CODES.get(exc.status_code, ErrorCode.INVALID_REQUEST),
                str(exc.detail)
            )
        
        return JSONResponse(
            status_code=exc.status_code,
            content=content,
            headers=getattr(exc, "headers", None)
        )
    
    # 请求体 / 路径参数校验失败
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request {request.method} {request.url.path}: {exc.errors()}")
        
        return JSONResponse(
            status_code=422,
            content=_error_body(
                ErrorCode.INVALID_REQUEST,
                "请求数据不合法",
                jsonable_encoder(exc.errors(), custom_encoder={Exception: str})
            )
        )
    
    @app.exception_handler(InvalidTarefaError)
    async def invalid_tarefa_handler(request: Request, exc: InvalidTarefaError):
        return JSONResponse(
            status_code=422,
            content=_error_body(ErrorCode.INVALID_REQUEST, str(exc))
        )
    
    # 存储不可用
    @app.exception_handler(DBAPIError)
    async def database_exception_handler(request: Request, exc: DBAPIError):
        logger.exception(f"Database error: {exc}")
        
        return JSONResponse(
            status_code=503,
            content=_error_body(
                ErrorCode.DATABASE_UNAVAILABLE,
                "数据库暂时不可用",
                str(exc.orig) if config.DEBUG else None
            )
        )
    
    # 全局异常处理
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """全局异常处理器"""
        logger.exception(f"Unhandled exception: {exc}")
        
        return JSONResponse(
            status_code=500,
            content=_error_body(
                ErrorCode.INTERNAL_ERROR,
                "服务器内部错误",
                str(exc) if config.DEBUG else None
            )
        )
    
    # 注册路由
    app.include_router(tarefas.router)
    
    # 根路径
    @app.get("/")
    async def root():
        """根路径"""
        return {
            "name": config.APP_NAME,
            "version": config.VERSION,
            "status": "running",
            "docs": "/docs",
            "redoc": "/redoc",
            "health": "/health"
        }
    
    # 健康检查（用于负载均衡器）
    @app.get("/health")
    def health_check():
        """健康检查"""
        ok, error = DependencyChecker.check_database(app.state.engine)
        
        response = {
            "status": "healthy" if ok else "degraded",
            "database": "ok" if ok else "unavailable"
        }
        
        if not ok:
            logger.warning(f"Health check failed: {error}")
            return JSONResponse(status_code=503, content=response)
        
        return response
    
    return app


# 创建 FastAPI 应用
app = create_app()


if __name__ == "__main__":
    import uvicorn
    
    uvicorn.run(
        "tarefas_api.main:app",
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.DEBUG,
        log_level="info"
    )
