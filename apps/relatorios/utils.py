# apps/relatorios/utils.py

from datetime import timedelta
from typing import Dict, List

from django.db.models import Count
from django.utils import timezone

from apps.core.models import MembroEquipe, Tarefa
from apps.tarefas.quadro import STATUS_TAREFA, agrupar_por_status, contar_por_status


def tarefas_para_relatorio():
    """Todas as tarefas com os relacionamentos usados nas exportações"""
    return Tarefa.objects.select_related(
        'pedido__cliente',
        'pedido__servico',
        'responsavel__usuario',
    ).order_by('-criado_em', '-id')


def linha_tarefa(tarefa) -> List:
    """
    Linha tabular de uma tarefa, comum ao CSV, Excel e PDF
    """
    return [
        tarefa.id,
        tarefa.nome,
        tarefa.descricao,
        tarefa.get_status_display(),
        tarefa.pedido.cliente.nome,
        tarefa.pedido.servico.nome,
        tarefa.responsavel.nome if tarefa.responsavel else '',
        tarefa.prazo.strftime('%d/%m/%Y') if tarefa.prazo else '',
        'Sim' if tarefa.esta_atrasada() else 'Não',
        timezone.localtime(tarefa.criado_em).strftime('%d/%m/%Y'),
    ]


CABECALHO_TAREFAS = [
    'ID', 'Tarefa', 'Descrição', 'Status', 'Cliente', 'Serviço',
    'Responsável', 'Prazo', 'Atrasada', 'Criada em'
]


def resumo_por_status(tarefas) -> List[Dict]:
    """
    Quantidade de tarefas por raia, na ordem do quadro
    """
    contagem = contar_por_status(agrupar_por_status(tarefas))
    total = sum(contagem.values())

    return [
        {
            'status': raia['status'],
            'titulo': raia['titulo'],
            'total': contagem[raia['status']],
            'percentual': (contagem[raia['status']] / total * 100) if total else 0,
        }
        for raia in STATUS_TAREFA
    ]


def calcular_distribuicao_equipe() -> List[Dict]:
    """
    Carga de trabalho por membro da equipe (tarefas não concluídas)
    """
    membros = MembroEquipe.objects.select_related('usuario').filter(ativo=True).annotate(
        total=Count('tarefas'),
    )

    distribuicao = []
    for membro in membros:
        abertas = membro.tarefas.exclude(status='completed').count()
        distribuicao.append({
            'membro': membro.nome,
            'total': membro.total,
            'abertas': abertas,
            'concluidas': membro.total - abertas,
        })

    # Ordenar por carga de trabalho
    distribuicao.sort(key=lambda x: x['abertas'], reverse=True)
    return distribuicao


def tarefas_atrasadas(tarefas) -> List:
    return [tarefa for tarefa in tarefas if tarefa.esta_atrasada()]


def tarefas_criadas_por_dia(dias: int = 30) -> List[Dict]:
    """
    Série diária de tarefas criadas nos últimos dias
    """
    fim = timezone.localdate()
    inicio = fim - timedelta(days=dias - 1)

    contagem = {
        registro['criado_em__date']: registro['total']
        for registro in Tarefa.objects.filter(criado_em__date__gte=inicio)
        .values('criado_em__date')
        .annotate(total=Count('id'))
    }

    return [
        {
            'data': (inicio + timedelta(days=i)).strftime('%d/%m'),
            'count': contagem.get(inicio + timedelta(days=i), 0),
        }
        for i in range(dias)
    ]
