# apps/tarefas/consumers.py

import json
import logging

from channels.generic.websocket import AsyncWebsocketConsumer
from django.utils import timezone

from .notificacoes import GRUPO_TAREFAS

logger = logging.getLogger(__name__)


class TarefasConsumer(AsyncWebsocketConsumer):
    """
    Consumer WebSocket para atualizações em tempo real do quadro

    Funcionalidades:
    - Notificações de movimentação de cards
    - Notificações de criação e exclusão de tarefas
    - Heartbeat (ping/pong)
    """

    async def connect(self):
        """
        Conecta usuário ao grupo do quadro
        """
        self.user = self.scope['user']

        if not self.user.is_authenticated:
            logger.warning("❌ Conexão WebSocket rejeitada - usuário não autenticado")
            await self.close()
            return

        self.grupo = GRUPO_TAREFAS
        await self.channel_layer.group_add(self.grupo, self.channel_name)
        await self.accept()

        logger.info(f"✅ WebSocket conectado - {self.user.username} no quadro de tarefas")

    async def disconnect(self, close_code):
        if hasattr(self, 'grupo'):
            await self.channel_layer.group_discard(self.grupo, self.channel_name)

        logger.info(f"🔌 WebSocket desconectado - código {close_code}")

    async def receive(self, text_data):
        """
        Recebe mensagens do cliente WebSocket
        """
        try:
            data = json.loads(text_data)
        except json.JSONDecodeError:
            logger.error(f"❌ JSON inválido recebido via WebSocket de {self.scope['user']}")
            return

        if data.get('type') == 'ping':
            await self.send(text_data=json.dumps({
                'type': 'pong',
                'timestamp': timezone.now().isoformat()
            }))

    # === Handlers dos eventos do quadro ===

    async def tarefa_movida(self, event):
        await self._repassar('tarefa_movida', event)

    async def tarefa_criada(self, event):
        await self._repassar('tarefa_criada', event)

    async def tarefa_excluida(self, event):
        await self._repassar('tarefa_excluida', event)

    async def _repassar(self, tipo, event):
        await self.send(text_data=json.dumps({
            'type': tipo,
            'message': event['message']
        }))
