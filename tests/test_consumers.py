# tests/test_consumers.py

import asyncio
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from django.contrib.auth.models import AnonymousUser

from apps.tarefas.consumers import TarefasConsumer
from apps.tarefas.notificacoes import GRUPO_TAREFAS, NotificadorQuadro, serializar_tarefa


def consumer_com(user):
    consumer = TarefasConsumer()
    consumer.scope = {'user': user}
    consumer.channel_name = 'canal-teste'
    consumer.channel_layer = AsyncMock()
    consumer.accept = AsyncMock()
    consumer.close = AsyncMock()
    consumer.send = AsyncMock()
    return consumer


def mensagem_enviada(consumer):
    return json.loads(consumer.send.call_args.kwargs['text_data'])


class TestTarefasConsumer:

    def test_rejeita_usuario_anonimo(self):
        consumer = consumer_com(AnonymousUser())

        asyncio.run(consumer.connect())

        consumer.close.assert_awaited_once()
        consumer.accept.assert_not_awaited()
        consumer.channel_layer.group_add.assert_not_awaited()

    def test_usuario_autenticado_entra_no_grupo(self):
        consumer = consumer_com(SimpleNamespace(is_authenticated=True, username='ana'))

        asyncio.run(consumer.connect())

        consumer.channel_layer.group_add.assert_awaited_once_with(GRUPO_TAREFAS, 'canal-teste')
        consumer.accept.assert_awaited_once()

    def test_disconnect_sai_do_grupo(self):
        consumer = consumer_com(SimpleNamespace(is_authenticated=True, username='ana'))
        asyncio.run(consumer.connect())

        asyncio.run(consumer.disconnect(1000))

        consumer.channel_layer.group_discard.assert_awaited_once_with(GRUPO_TAREFAS, 'canal-teste')

    def test_ping_responde_pong(self):
        consumer = consumer_com(SimpleNamespace(is_authenticated=True, username='ana'))

        asyncio.run(consumer.receive(text_data=json.dumps({'type': 'ping'})))

        assert mensagem_enviada(consumer)['type'] == 'pong'

    def test_json_invalido_e_ignorado(self):
        consumer = consumer_com(SimpleNamespace(is_authenticated=True, username='ana'))

        asyncio.run(consumer.receive(text_data='{quebrado'))

        consumer.send.assert_not_awaited()

    @pytest.mark.parametrize('evento', ['tarefa_movida', 'tarefa_criada', 'tarefa_excluida'])
    def test_eventos_do_quadro_repassados(self, evento):
        consumer = consumer_com(SimpleNamespace(is_authenticated=True, username='ana'))
        message = {'tarefa': {'id': 7, 'status': 'review'}, 'usuario': 'Ana'}

        asyncio.run(getattr(consumer, evento)({'type': evento, 'message': message}))

        assert mensagem_enviada(consumer) == {'type': evento, 'message': message}


@pytest.mark.django_db
class TestNotificadorQuadro:

    def test_envia_evento_para_o_grupo(self, gerente, criar_tarefa):
        tarefa = criar_tarefa('Layout', status='review')
        channel_layer = AsyncMock()

        with patch('apps.tarefas.notificacoes.get_channel_layer', return_value=channel_layer):
            NotificadorQuadro(gerente)('tarefa_movida', tarefa)

        grupo, evento = channel_layer.group_send.await_args.args
        assert grupo == GRUPO_TAREFAS
        assert evento['type'] == 'tarefa_movida'
        assert evento['message']['tarefa'] == serializar_tarefa(tarefa)
        assert evento['message']['usuario'] == 'Gabriela Reis'

    def test_sem_channel_layer_nao_faz_nada(self, gerente, criar_tarefa):
        tarefa = criar_tarefa('Layout')

        with patch('apps.tarefas.notificacoes.get_channel_layer', return_value=None):
            NotificadorQuadro(gerente)('tarefa_criada', tarefa)
