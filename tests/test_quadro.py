# tests/test_quadro.py

from types import SimpleNamespace

from apps.tarefas.quadro import (
    RAIAS,
    agrupar_por_status,
    contar_por_status,
    eh_status_valido,
    filtrar_tarefas,
    montar_colunas,
)


def tarefa(id, status, nome='Tarefa', descricao='', cliente='Cliente'):
    return SimpleNamespace(
        id=id,
        status=status,
        nome=nome,
        descricao=descricao,
        pedido=SimpleNamespace(cliente=SimpleNamespace(nome=cliente)),
    )


def test_raias_na_ordem_do_quadro():
    assert RAIAS == ['to_do', 'in_progress', 'review', 'completed']


def test_status_valido():
    assert eh_status_valido('review')
    assert not eh_status_valido('done')
    assert not eh_status_valido(None)


def test_lista_vazia_gera_quatro_raias_vazias():
    raias = agrupar_por_status([])

    assert list(raias) == RAIAS
    assert all(tarefas == [] for tarefas in raias.values())


def test_agrupa_mantendo_ordem_dentro_da_raia():
    tarefas = [
        tarefa(5, 'to_do'),
        tarefa(4, 'review'),
        tarefa(3, 'to_do'),
        tarefa(2, 'completed'),
        tarefa(1, 'to_do'),
    ]

    raias = agrupar_por_status(tarefas)

    assert [t.id for t in raias['to_do']] == [5, 3, 1]
    assert [t.id for t in raias['review']] == [4]
    assert [t.id for t in raias['completed']] == [2]
    assert raias['in_progress'] == []


def test_cada_tarefa_aparece_em_exatamente_uma_raia():
    tarefas = [tarefa(i, RAIAS[i % 4]) for i in range(10)]

    raias = agrupar_por_status(tarefas)
    ids = [t.id for grupo in raias.values() for t in grupo]

    assert sorted(ids) == list(range(10))
    for status, grupo in raias.items():
        assert all(t.status == status for t in grupo)


def test_status_desconhecido_fica_fora_do_quadro():
    raias = agrupar_por_status([tarefa(1, 'archived'), tarefa(2, 'to_do')])

    assert [t.id for t in raias['to_do']] == [2]
    assert sum(len(grupo) for grupo in raias.values()) == 1


def test_contagem_por_raia():
    raias = agrupar_por_status([tarefa(1, 'to_do'), tarefa(2, 'to_do'), tarefa(3, 'review')])

    assert contar_por_status(raias) == {
        'to_do': 2,
        'in_progress': 0,
        'review': 1,
        'completed': 0,
    }


def test_colunas_trazem_metadados_e_total():
    colunas = montar_colunas(agrupar_por_status([tarefa(1, 'completed')]))

    assert [c['status'] for c in colunas] == RAIAS
    assert colunas[0]['titulo'] == 'A Fazer'
    assert colunas[3]['total'] == 1
    assert colunas[3]['tarefas'][0].id == 1


def test_filtro_por_nome_descricao_ou_cliente():
    tarefas = [
        tarefa(1, 'to_do', nome='Layout da home'),
        tarefa(2, 'to_do', descricao='Revisar LAYOUT do rodapé'),
        tarefa(3, 'to_do', cliente='Layout Store'),
        tarefa(4, 'to_do', nome='Calendário de posts'),
    ]

    assert [t.id for t in filtrar_tarefas(tarefas, 'layout')] == [1, 2, 3]


def test_filtro_vazio_devolve_todas():
    tarefas = [tarefa(1, 'to_do'), tarefa(2, 'review')]

    assert filtrar_tarefas(tarefas, '   ') == tarefas
