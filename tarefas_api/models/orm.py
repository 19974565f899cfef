"""数据库表模型"""
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import declarative_base

from ..constants import TITULO_MAX_LENGTH

Base = declarative_base()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TarefaModel(Base):
    __tablename__ = "tarefas"
    # SQLite 默认会复用已删除的最大 id
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    titulo = Column(String(TITULO_MAX_LENGTH), nullable=False)
    descricao = Column(Text, nullable=True)
    concluida = Column(Boolean, nullable=False, default=False)
    criada_em = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __repr__(self) -> str:
        return f"<TarefaModel id={self.id} titulo={self.titulo!r}>"
