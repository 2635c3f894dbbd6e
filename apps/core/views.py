# apps/core/views.py

import logging

from django.contrib.auth.decorators import login_required
from django.core.cache import cache
from django.db import DatabaseError
from django.http import JsonResponse
from django.shortcuts import render
from django.utils import timezone

from apps import __version__
from .models import Cliente, Pedido, Tarefa, Usuario

logger = logging.getLogger(__name__)


@login_required
def painel_principal(request):
    """
    Painel principal com os indicadores do negócio
    """
    stats = calcular_estatisticas_painel()
    atividades_recentes = obter_atividades_recentes()

    context = {
        'title': 'Painel Principal',
        'stats': stats,
        'atividades_recentes': atividades_recentes,
    }

    return render(request, 'core/painel.html', context)


def calcular_estatisticas_painel():
    """
    Calcula os cartões de estatística do painel

    Falhas de consulta deixam os contadores zerados.
    """
    try:
        total_pedidos = Pedido.objects.count()
        pedidos_concluidos = Pedido.objects.filter(status='completed').count()

        return {
            'total_clientes': Cliente.objects.filter(ativo=True).count(),
            'pedidos_ativos': Pedido.objects.filter(status__in=Pedido.STATUS_ELEGIVEIS_TAREFA).count(),
            'pedidos_concluidos': pedidos_concluidos,
            'tarefas_pendentes': Tarefa.objects.filter(status='to_do').count(),
            'taxa_conclusao': (pedidos_concluidos / total_pedidos * 100) if total_pedidos else 0,
        }
    except DatabaseError as e:
        logger.error(f"❌ Erro ao calcular estatísticas do painel: {e}")
        return {
            'total_clientes': 0,
            'pedidos_ativos': 0,
            'pedidos_concluidos': 0,
            'tarefas_pendentes': 0,
            'taxa_conclusao': 0,
        }


def obter_atividades_recentes(limite=5):
    """
    Retorna as tarefas criadas mais recentemente
    """
    try:
        tarefas = list(
            Tarefa.objects.select_related('pedido__cliente').order_by('-criado_em', '-id')[:limite]
        )
    except DatabaseError as e:
        logger.error(f"❌ Erro ao buscar atividades recentes: {e}")
        return []

    return [
        {
            'id': tarefa.id,
            'tipo': 'tarefa',
            'titulo': f'Nova tarefa: {tarefa.nome}',
            'descricao': f'Para o cliente {tarefa.pedido.cliente.nome}',
            'status': tarefa.status,
            'quando': tarefa.criado_em,
        }
        for tarefa in tarefas
    ]


def health_check(request):
    """
    Health check para monitoramento
    """
    try:
        # Verificar conexão com banco
        Usuario.objects.count()

        # Verificar cache (Redis em produção)
        cache.set('health_check', 'ok', 60)
        cache.get('health_check')

        status = {
            'status': 'healthy',
            'database': 'ok',
            'cache': 'ok',
            'timestamp': timezone.now().isoformat(),
            'version': __version__
        }

        return JsonResponse(status)

    except Exception as e:
        logger.error(f"❌ Health check falhou: {e}")
        status = {
            'status': 'unhealthy',
            'error': str(e),
            'timestamp': timezone.now().isoformat(),
            'version': __version__
        }

        return JsonResponse(status, status=500)
