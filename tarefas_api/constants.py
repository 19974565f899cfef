"""API 常量定义"""


# 资源路径前缀
API_PREFIX = "/api/tarefas"


# 字段长度限制
TITULO_MAX_LENGTH = 200
DESCRICAO_MAX_LENGTH = 2000


class ErrorCode:
    """错误码"""
    # 通用错误
    INTERNAL_ERROR = "INTERNAL_ERROR"
    INVALID_REQUEST = "INVALID_REQUEST"
    NOT_FOUND = "NOT_FOUND"
    METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
    
    # 任务相关
    TAREFA_NOT_FOUND = "TAREFA_NOT_FOUND"
    
    # 存储错误
    DATABASE_UNAVAILABLE = "DATABASE_UNAVAILABLE"
