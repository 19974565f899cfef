"""数据模型"""

from .tarefa import Tarefa, TarefaCreate, TarefaUpdate
from .error import ErrorResponse
from .orm import Base, TarefaModel

__all__ = [
    "Tarefa",
    "TarefaCreate",
    "TarefaUpdate",
    "ErrorResponse",
    "Base",
    "TarefaModel",
]
