"""API 配置管理"""
from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings

from .middleware.cors import CorsPolicy


class Settings(BaseSettings):
    """应用配置"""
    
    # ============================================================
    # 应用基础配置
    # ============================================================
    APP_NAME: str = "Tarefas API"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    
    # ============================================================
    # 路径配置
    # ============================================================
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOG_DIR: Path = PROJECT_ROOT / "logs"
    
    # ============================================================
    # 数据库配置
    # ============================================================
    DATABASE_URL: str = f"sqlite:///{PROJECT_ROOT / 'tarefas.db'}"
    DATABASE_ECHO: bool = False
    
    # ============================================================
    # 日志配置
    # ============================================================
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    
    # ============================================================
    # CORS 配置（逗号分隔，按部署环境覆盖）
    # ============================================================
    CORS_ALLOWED_ORIGINS: str = "http://localhost:5173"  # Vite 开发服务器
    CORS_ALLOWED_METHODS: str = "GET,POST,PUT,DELETE,OPTIONS"
    CORS_ALLOWED_HEADERS: str = "*"
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_PATH_PREFIX: str = "/api/tarefas"
    CORS_MAX_AGE: int = 600
    
    class Config:
        env_file = ".env"
        case_sensitive = True
    
    def cors_policy(self) -> CorsPolicy:
        """根据配置构建不可变的 CORS 策略"""
        return CorsPolicy(
            allowed_origins=_split_csv(self.CORS_ALLOWED_ORIGINS),
            allowed_methods=tuple(m.upper() for m in _split_csv(self.CORS_ALLOWED_METHODS)),
            allowed_headers=_split_csv(self.CORS_ALLOWED_HEADERS),
            allow_credentials=self.CORS_ALLOW_CREDENTIALS,
            path_prefix=self.CORS_PATH_PREFIX,
            max_age=self.CORS_MAX_AGE,
        )


def _split_csv(value: str) -> tuple:
    return tuple(item.strip() for item in value.split(",") if item.strip())


# 全局配置实例
settings = Settings()


def ensure_directories(config: Settings = settings):
    """确保所有必要的目录存在"""
    directories: List[Path] = []
    
    if config.LOG_TO_FILE:
        directories.append(config.LOG_DIR)
    
    for directory in directories:
        directory.mkdir(parents=True, exist_ok=True)
