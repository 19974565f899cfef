"""任务服务"""
from typing import List

from ..models.tarefa import Tarefa, TarefaCreate, TarefaUpdate
from ..utils.logger import logger
from .tarefa_repository import TarefaRepository


class TarefaError(Exception):
    """任务服务异常基类"""


class TarefaNotFoundError(TarefaError):
    """任务不存在"""

    def __init__(self, tarefa_id: int):
        super().__init__(f"任务不存在: {tarefa_id}")
        self.tarefa_id = tarefa_id


class InvalidTarefaError(TarefaError):
    """请求数据不合法"""


class TarefaService:
    """HTTP 层与存储之间的中介"""

    def __init__(self, repository: TarefaRepository):
        self.repository = repository

    def listar_todas(self) -> List[Tarefa]:
        """获取所有任务（按 id 升序）"""
        return self.repository.list_tarefas()

    def buscar_tarefa(self, tarefa_id: int) -> Tarefa:
        _check_id(tarefa_id)
        tarefa = self.repository.get_tarefa(tarefa_id)
        if tarefa is None:
            raise TarefaNotFoundError(tarefa_id)
        return tarefa

    def criar_tarefa(self, dados: TarefaCreate) -> Tarefa:
        """创建任务，id 由存储分配"""
        if not dados.titulo or not dados.titulo.strip():
            raise InvalidTarefaError("标题不能为空")

        tarefa = self.repository.create_tarefa(dados.model_dump())
        logger.info(f"Created tarefa {tarefa.id}")
        return tarefa

    def atualizar_tarefa(self, tarefa_id: int, dados: TarefaUpdate) -> Tarefa:
        """更新任务（只修改请求中出现的字段）"""
        _check_id(tarefa_id)
        changes = dados.model_dump(exclude_unset=True)
        if "titulo" in changes and not changes["titulo"].strip():
            raise InvalidTarefaError("标题不能为空")

        tarefa = self.repository.update_tarefa(tarefa_id, changes)
        if tarefa is None:
            raise TarefaNotFoundError(tarefa_id)

        logger.info(f"Updated tarefa {tarefa_id}: {sorted(changes)}")
        return tarefa

    def deletar_tarefa(self, tarefa_id: int) -> None:
        """删除任务；id 不存在时视为成功（幂等）"""
        _check_id(tarefa_id)
        if self.repository.delete_tarefa(tarefa_id):
            logger.info(f"Deleted tarefa {tarefa_id}")
        else:
            logger.info(f"Delete skipped, tarefa {tarefa_id} does not exist")


def _check_id(tarefa_id: int) -> None:
    if isinstance(tarefa_id, bool) or not isinstance(tarefa_id, int) or tarefa_id < 1:
        raise InvalidTarefaError(f"无效的任务ID: {tarefa_id}")
