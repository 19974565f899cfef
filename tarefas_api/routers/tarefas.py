"""任务 API 路由"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, Response, Path as PathParam

from ..constants import API_PREFIX, ErrorCode
from ..models.tarefa import Tarefa, TarefaCreate, TarefaUpdate
from ..models.error import ErrorResponse
from ..services.tarefa_service import TarefaService, TarefaNotFoundError


router = APIRouter(
    prefix=API_PREFIX,
    tags=["tarefas"]
)


def get_tarefa_service(request: Request) -> TarefaService:
    """从应用状态中取出启动时注入的服务"""
    return request.app.state.tarefa_service


def _not_found(exc: TarefaNotFoundError) -> HTTPException:
    return HTTPException(
        status_code=404,
        detail={
            "error_code": ErrorCode.TAREFA_NOT_FOUND,
            "error_message": str(exc)
        }
    )


@router.get(
    "",
    response_model=List[Tarefa],
    summary="获取任务列表",
    description="获取所有任务，按 id 升序排列；没有任务时返回空数组"
)
def listar(service: TarefaService = Depends(get_tarefa_service)):
    """获取任务列表"""
    return service.listar_todas()


@router.post(
    "",
    response_model=Tarefa,
    status_code=201,
    responses={422: {"model": ErrorResponse}},
    summary="创建任务",
    description="创建新任务，请求体中的 id 会被忽略"
)
def criar(
    tarefa: TarefaCreate,
    service: TarefaService = Depends(get_tarefa_service)
):
    """创建任务"""
    return service.criar_tarefa(tarefa)


@router.get(
    "/{tarefa_id}",
    response_model=Tarefa,
    responses={404: {"model": ErrorResponse}},
    summary="查询任务",
    description="根据任务ID查询单个任务"
)
def buscar(
    tarefa_id: int = PathParam(..., ge=1, description="任务ID"),
    service: TarefaService = Depends(get_tarefa_service)
):
    """查询任务"""
    try:
        return service.buscar_tarefa(tarefa_id)
    except TarefaNotFoundError as e:
        raise _not_found(e)


@router.put(
    "/{tarefa_id}",
    response_model=Tarefa,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
    summary="更新任务",
    description="更新任务的标题、描述或完成状态，只修改请求中出现的字段"
)
def atualizar(
    dados: TarefaUpdate,
    tarefa_id: int = PathParam(..., ge=1, description="任务ID"),
    service: TarefaService = Depends(get_tarefa_service)
):
    """更新任务"""
    try:
        return service.atualizar_tarefa(tarefa_id, dados)
    except TarefaNotFoundError as e:
        raise _not_found(e)


@router.delete(
    "/{tarefa_id}",
    status_code=204,
    response_class=Response,
    summary="删除任务",
    description="删除任务；任务不存在时同样返回 204"
)
def deletar(
    tarefa_id: int = PathParam(..., ge=1, description="任务ID"),
    service: TarefaService = Depends(get_tarefa_service)
):
    """删除任务"""
    service.deletar_tarefa(tarefa_id)
    return Response(status_code=204)
