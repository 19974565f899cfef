from __future__ import annotations

from tarefas_api.services.tarefa_repository import TarefaRepository


def test_create_assigns_increasing_ids(repository: TarefaRepository) -> None:
    first = repository.create_tarefa({"titulo": "one"})
    second = repository.create_tarefa({"titulo": "two"})

    assert first.id >= 1
    assert second.id > first.id
    assert first.criada_em is not None
    assert first.concluida is False


def test_create_drops_client_id(repository: TarefaRepository) -> None:
    tarefa = repository.create_tarefa({"id": 500, "titulo": "x"})

    assert tarefa.id != 500
    assert repository.get_tarefa(500) is None


def test_ids_not_reused_after_delete(repository: TarefaRepository) -> None:
    repository.create_tarefa({"titulo": "one"})
    last = repository.create_tarefa({"titulo": "two"})

    assert repository.delete_tarefa(last.id) is True
    replacement = repository.create_tarefa({"titulo": "three"})

    assert replacement.id > last.id


def test_list_ordered_by_id(repository: TarefaRepository) -> None:
    for titulo in ("c", "a", "b"):
        repository.create_tarefa({"titulo": titulo})

    assert [t.titulo for t in repository.list_tarefas()] == ["c", "a", "b"]


def test_update_returns_none_for_missing(repository: TarefaRepository) -> None:
    assert repository.update_tarefa(1, {"titulo": "x"}) is None


def test_update_keeps_id_and_criada_em(repository: TarefaRepository) -> None:
    created = repository.create_tarefa({"titulo": "old"})

    updated = repository.update_tarefa(
        created.id, {"id": 999, "titulo": "new", "concluida": True}
    )

    assert updated.id == created.id
    assert updated.titulo == "new"
    assert updated.concluida is True
    assert updated.criada_em == created.criada_em


def test_delete_missing_returns_false(repository: TarefaRepository) -> None:
    assert repository.delete_tarefa(404) is False
