"""任务数据模型"""
from datetime import datetime, timezone
from typing import Any, Optional
from pydantic import BaseModel, Field, field_validator

from ..constants import TITULO_MAX_LENGTH, DESCRICAO_MAX_LENGTH


def _clean_titulo(value: Any) -> Any:
    # 先去掉首尾空白，再做长度校验
    if not isinstance(value, str):
        return value
    value = value.strip()
    if not value:
        raise ValueError("标题不能为空")
    return value


class TarefaCreate(BaseModel):
    """创建任务请求（请求体中的 id 会被忽略）"""
    titulo: str = Field(..., max_length=TITULO_MAX_LENGTH, description="任务标题")
    descricao: Optional[str] = Field(None, max_length=DESCRICAO_MAX_LENGTH, description="任务描述")
    concluida: bool = Field(False, description="是否已完成")
    
    @field_validator("titulo", mode="before")
    @classmethod
    def titulo_not_blank(cls, value: Any) -> Any:
        return _clean_titulo(value)


class TarefaUpdate(BaseModel):
    """更新任务请求（仅更新传入的字段）"""
    titulo: Optional[str] = Field(None, max_length=TITULO_MAX_LENGTH, description="任务标题")
    descricao: Optional[str] = Field(None, max_length=DESCRICAO_MAX_LENGTH, description="任务描述")
    concluida: Optional[bool] = Field(None, description="是否已完成")
    
    @field_validator("titulo", mode="before")
    @classmethod
    def titulo_not_blank(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("标题不能为 null")
        return _clean_titulo(value)
    
    @field_validator("concluida")
    @classmethod
    def concluida_not_null(cls, value: Optional[bool]) -> bool:
        if value is None:
            raise ValueError("完成状态不能为 null")
        return value


class Tarefa(BaseModel):
    """任务模型"""
    id: int
    titulo: str
    descricao: Optional[str] = None
    concluida: bool = False
    
    # 时间信息（UTC）
    criada_em: datetime
    
    class Config:
        from_attributes = True
    
    @field_validator("criada_em")
    @classmethod
    def criada_em_utc(cls, value: datetime) -> datetime:
        # SQLite 读回的时间不带时区，存入时是 UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
