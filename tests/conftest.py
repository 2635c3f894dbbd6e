# tests/conftest.py

import pytest

from apps.core.models import Cliente, MembroEquipe, Pedido, Servico, Tarefa, Usuario


@pytest.fixture
def gerente(db):
    # O signal de criação já inclui gerentes na equipe
    return Usuario.objects.create_user(
        username='gerente',
        password='senha-forte-123',
        first_name='Gabriela',
        last_name='Reis',
        tipo='gerente',
    )


@pytest.fixture
def usuario_cliente(db):
    return Usuario.objects.create_user(
        username='cliente',
        password='senha-forte-123',
        tipo='cliente',
    )


@pytest.fixture
def membro(gerente):
    return MembroEquipe.objects.get(usuario=gerente)


@pytest.fixture
def cliente(db):
    return Cliente.objects.create(nome='Padaria Pão Quente', email='contato@paoquente.com.br')


@pytest.fixture
def servico(db):
    return Servico.objects.create(nome='Site institucional', preco_base=3500)


@pytest.fixture
def pedido(cliente, servico):
    return Pedido.objects.create(cliente=cliente, servico=servico, status='in_progress')


@pytest.fixture
def pedido_concluido(cliente, servico):
    return Pedido.objects.create(cliente=cliente, servico=servico, status='completed')


@pytest.fixture
def criar_tarefa(pedido):
    def _criar(nome='Tarefa', status='to_do', **campos):
        campos.setdefault('pedido', pedido)
        return Tarefa.objects.create(nome=nome, status=status, **campos)

    return _criar


@pytest.fixture
def client_gerente(client, gerente):
    client.force_login(gerente)
    return client


@pytest.fixture
def client_cliente(client, usuario_cliente):
    client.force_login(usuario_cliente)
    return client
