"""任务存储"""
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from ..models.orm import TarefaModel
from ..models.tarefa import Tarefa


def _to_schema(model: TarefaModel) -> Tarefa:
    return Tarefa.model_validate(model)


class TarefaRepository:
    """基于 SQLAlchemy 的任务存储，id 由数据库分配"""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def list_tarefas(self) -> List[Tarefa]:
        with self.session_factory() as session:
            stmt = select(TarefaModel).order_by(TarefaModel.id.asc())
            return [_to_schema(tarefa) for tarefa in session.scalars(stmt)]

    def get_tarefa(self, tarefa_id: int) -> Optional[Tarefa]:
        with self.session_factory() as session:
            tarefa = session.get(TarefaModel, tarefa_id)
            return _to_schema(tarefa) if tarefa else None

    def create_tarefa(self, data: Dict) -> Tarefa:
        data = {key: value for key, value in data.items() if key != "id"}
        with self.session_factory() as session:
            tarefa = TarefaModel(**data)
            session.add(tarefa)
            session.commit()
            session.refresh(tarefa)
            return _to_schema(tarefa)

    def update_tarefa(self, tarefa_id: int, data: Dict) -> Optional[Tarefa]:
        with self.session_factory() as session:
            tarefa = session.get(TarefaModel, tarefa_id)
            if not tarefa:
                return None

            for key, value in data.items():
                if key in ("id", "criada_em"):
                    continue
                setattr(tarefa, key, value)
            session.commit()
            session.refresh(tarefa)
            return _to_schema(tarefa)

    def delete_tarefa(self, tarefa_id: int) -> bool:
        with self.session_factory() as session:
            tarefa = session.get(TarefaModel, tarefa_id)
            if not tarefa:
                return False
            session.delete(tarefa)
            session.commit()
            return True
