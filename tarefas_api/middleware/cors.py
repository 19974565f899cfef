"""跨域访问策略"""
from dataclasses import dataclass
from typing import Tuple

from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send


@dataclass(frozen=True)
class CorsPolicy:
    """
    不可变的 CORS 策略，启动时构建一次
    
    Attributes:
        allowed_origins: 允许的来源（scheme+host+port）
        allowed_methods: 允许的 HTTP 方法
        allowed_headers: 允许的请求头，"*" 表示全部
        allow_credentials: 是否允许携带凭据
        path_prefix: 策略生效的路径前缀
        max_age: 预检结果缓存时间（秒）
    """
    allowed_origins: Tuple[str, ...] = ("http://localhost:5173",)
    allowed_methods: Tuple[str, ...] = ("GET", "POST", "PUT", "DELETE", "OPTIONS")
    allowed_headers: Tuple[str, ...] = ("*",)
    allow_credentials: bool = True
    path_prefix: str = "/api/tarefas"
    max_age: int = 600
    
    def __post_init__(self):
        # 浏览器拒绝 "*" 与凭据同时出现
        if self.allow_credentials and "*" in self.allowed_origins:
            raise ValueError("Wildcard origin cannot be combined with allow_credentials")
        if not self.path_prefix.startswith("/"):
            raise ValueError(f"CORS path prefix must start with '/': {self.path_prefix}")
    
    def matches(self, path: str) -> bool:
        """路径是否在策略作用范围内"""
        prefix = self.path_prefix.rstrip("/")
        if not prefix:
            return True
        return path == prefix or path.startswith(prefix + "/")


class CorsPolicyMiddleware:
    """仅对匹配前缀的路径应用 CORS，其余请求直接透传"""
    
    def __init__(self, app: ASGIApp, policy: CorsPolicy):
        self.app = app
        self.policy = policy
        self.cors = CORSMiddleware(
            app,
            allow_origins=list(policy.allowed_origins),
            allow_methods=list(policy.allowed_methods),
            allow_headers=list(policy.allowed_headers),
            allow_credentials=policy.allow_credentials,
            max_age=policy.max_age,
        )
    
    async def __call__(self, scope: Scope, receive: Receive, send: Send):
        if scope["type"] == "http" and self.policy.matches(scope["path"]):
            await self.cors(scope, receive, send)
            return
        
        await self.app(scope, receive, send)
