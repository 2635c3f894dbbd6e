# tests/test_models.py

from datetime import timedelta

import pytest
from django.db import IntegrityError, transaction
from django.db.models.deletion import ProtectedError
from django.utils import timezone

from apps.core.models import MembroEquipe, Tarefa, Usuario

pytestmark = pytest.mark.django_db


def test_tarefa_nasce_em_to_do(pedido):
    tarefa = Tarefa.objects.create(nome='Layout', pedido=pedido)

    assert tarefa.status == 'to_do'
    assert tarefa.cliente_nome == 'Padaria Pão Quente'
    assert tarefa.servico_nome == 'Site institucional'


def test_status_fora_das_raias_violam_constraint(pedido):
    with pytest.raises(IntegrityError), transaction.atomic():
        Tarefa.objects.create(nome='Layout', pedido=pedido, status='archived')


def test_mais_recentes_primeiro(criar_tarefa):
    primeira = criar_tarefa('Primeira')
    segunda = criar_tarefa('Segunda')

    assert list(Tarefa.objects.all()) == [segunda, primeira]


def test_atraso(criar_tarefa):
    ontem = timezone.localdate() - timedelta(days=1)

    assert criar_tarefa('A', prazo=ontem).esta_atrasada()
    assert not criar_tarefa('B', prazo=ontem, status='completed').esta_atrasada()
    assert not criar_tarefa('C').esta_atrasada()


def test_pedido_com_tarefas_nao_pode_ser_excluido(criar_tarefa, pedido):
    criar_tarefa('Layout')

    with pytest.raises(ProtectedError):
        pedido.delete()


def test_excluir_membro_mantem_tarefa_sem_responsavel(criar_tarefa, membro):
    tarefa = criar_tarefa('Layout', responsavel=membro)

    membro.delete()
    tarefa.refresh_from_db()

    assert tarefa.responsavel is None


def test_pedido_aceita_tarefas(pedido, pedido_concluido):
    assert pedido.aceita_tarefas()
    assert not pedido_concluido.aceita_tarefas()


def test_gerente_entra_na_equipe_automaticamente(gerente, usuario_cliente):
    assert MembroEquipe.objects.filter(usuario=gerente).exists()
    assert not MembroEquipe.objects.filter(usuario=usuario_cliente).exists()


def test_nome_do_membro(db):
    usuario = Usuario.objects.create_user(username='bruno', tipo='admin')

    assert usuario.membro_equipe.nome == 'bruno'
