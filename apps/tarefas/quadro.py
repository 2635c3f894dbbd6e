# apps/tarefas/quadro.py

"""
Projeção do quadro Kanban

Agrupa a lista plana de tarefas nas quatro raias do quadro. A raia de
uma tarefa é sempre o seu status, e a ordem de chegada (mais recentes
primeiro) é mantida dentro de cada raia.
"""

import logging
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)


# Ordem das raias no quadro, da esquerda para a direita
STATUS_TAREFA = [
    {
        'status': 'to_do',
        'titulo': 'A Fazer',
        'icone': '🕒',
        'cor': '#6B7280',  # cinza
    },
    {
        'status': 'in_progress',
        'titulo': 'Em Progresso',
        'icone': '⚙️',
        'cor': '#3B82F6',  # azul
    },
    {
        'status': 'review',
        'titulo': 'Em Revisão',
        'icone': '👀',
        'cor': '#F59E0B',  # amarelo
    },
    {
        'status': 'completed',
        'titulo': 'Concluído',
        'icone': '✅',
        'cor': '#10B981',  # verde
    },
]

RAIAS = [raia['status'] for raia in STATUS_TAREFA]


def eh_status_valido(status) -> bool:
    """Verifica se o status corresponde a uma raia do quadro"""
    return status in RAIAS


def agrupar_por_status(tarefas: Iterable) -> Dict[str, List]:
    """
    Particiona as tarefas nas quatro raias

    Todas as raias estão sempre presentes no resultado, mesmo vazias.
    """
    raias = {status: [] for status in RAIAS}

    for tarefa in tarefas:
        if tarefa.status not in raias:
            logger.warning(f"⚠️ Tarefa {tarefa.id} com status desconhecido '{tarefa.status}' ignorada")
            continue
        raias[tarefa.status].append(tarefa)

    return raias


def contar_por_status(raias: Dict[str, List]) -> Dict[str, int]:
    """Contador exibido no cabeçalho de cada raia"""
    return {status: len(raias.get(status, [])) for status in RAIAS}


def montar_colunas(raias: Dict[str, List]) -> List[Dict]:
    """
    Junta metadados visuais de cada raia com suas tarefas
    Usado pelos templates e pela API JSON
    """
    colunas = []
    for raia in STATUS_TAREFA:
        tarefas = raias.get(raia['status'], [])
        colunas.append({
            **raia,
            'tarefas': tarefas,
            'total': len(tarefas),
        })
    return colunas


def filtrar_tarefas(tarefas: Iterable, termo: str) -> List:
    """
    Busca por nome, descrição ou nome do cliente (sem diferenciar maiúsculas)
    """
    tarefas = list(tarefas)
    termo = (termo or '').strip().lower()
    if not termo:
        return tarefas

    resultado = []
    for tarefa in tarefas:
        campos = [
            tarefa.nome,
            tarefa.descricao,
            _nome_cliente(tarefa),
        ]
        if any(termo in (campo or '').lower() for campo in campos):
            resultado.append(tarefa)

    return resultado


def _nome_cliente(tarefa):
    pedido = getattr(tarefa, 'pedido', None)
    cliente = getattr(pedido, 'cliente', None)
    return getattr(cliente, 'nome', None)
