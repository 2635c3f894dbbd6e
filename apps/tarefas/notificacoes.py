# apps/tarefas/notificacoes.py

import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer
from django.utils import timezone

logger = logging.getLogger(__name__)

GRUPO_TAREFAS = 'tarefas'


def serializar_tarefa(tarefa):
    """Representação JSON usada pela API e pelos WebSockets"""
    return {
        'id': tarefa.id,
        'nome': tarefa.nome,
        'descricao': tarefa.descricao,
        'status': tarefa.status,
        'prazo': tarefa.prazo.isoformat() if tarefa.prazo else None,
        'responsavel': tarefa.responsavel.nome if tarefa.responsavel else None,
        'cliente': tarefa.pedido.cliente.nome,
        'servico': tarefa.pedido.servico.nome,
        'criado_em': tarefa.criado_em.isoformat() if tarefa.criado_em else None,
    }


class NotificadorQuadro:
    """
    Inscrito do QuadroTarefas que repassa eventos ao grupo WebSocket
    """

    def __init__(self, usuario):
        self.usuario = usuario

    def __call__(self, evento, tarefa):
        channel_layer = get_channel_layer()
        if channel_layer is None:
            return

        async_to_sync(channel_layer.group_send)(
            GRUPO_TAREFAS,
            {
                'type': evento,
                'message': {
                    'tarefa': serializar_tarefa(tarefa),
                    'usuario': self.usuario.get_full_name() or self.usuario.username,
                    'timestamp': timezone.now().isoformat()
                }
            }
        )
        logger.debug(f"📡 Evento {evento} enviado para a tarefa {tarefa.id}")
