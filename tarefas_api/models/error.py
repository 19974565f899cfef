"""错误响应模型"""
from typing import Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """
    统一错误响应
    
    HTTPException 的 detail 与全局异常处理器都使用这个结构
    """
    error_code: str
    error_message: str
    error_details: Optional[Any] = None
