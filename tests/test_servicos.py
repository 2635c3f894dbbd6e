# tests/test_servicos.py

from datetime import timedelta
from types import SimpleNamespace

import pytest
from django.db import DatabaseError
from django.utils import timezone

from apps.core.models import Tarefa
from apps.tarefas.servicos import QuadroTarefas


class RepositorioFalso:
    """Repositório em memória que registra as chamadas recebidas"""

    def __init__(self, tarefas=None, falhar=None):
        self.tarefas = list(tarefas or [])
        self.falhar = falhar or set()
        self.atualizacoes = []
        self.insercoes = []
        self.exclusoes = []

    def _talvez_falhar(self, operacao):
        if operacao in self.falhar:
            raise DatabaseError(f"falha simulada em {operacao}")

    def listar(self):
        self._talvez_falhar('listar')
        return list(self.tarefas)

    def inserir(self, **campos):
        self._talvez_falhar('inserir')
        self.insercoes.append(campos)
        tarefa = SimpleNamespace(id=100 + len(self.insercoes), **campos)
        self.tarefas.insert(0, tarefa)
        return tarefa

    def atualizar_status(self, tarefa_id, status):
        self._talvez_falhar('atualizar_status')
        self.atualizacoes.append((tarefa_id, status))

    def excluir(self, tarefa_id):
        self._talvez_falhar('excluir')
        self.exclusoes.append(tarefa_id)


def tarefa(id, status):
    return SimpleNamespace(id=id, status=status, nome=f'Tarefa {id}')


@pytest.fixture
def repositorio():
    return RepositorioFalso([
        tarefa(3, 'to_do'),
        tarefa(2, 'in_progress'),
        tarefa(1, 'to_do'),
    ])


@pytest.fixture
def quadro(repositorio):
    quadro = QuadroTarefas(repositorio=repositorio)
    quadro.carregar()
    return quadro


class TestCarregar:

    def test_carrega_tarefas_do_repositorio(self, quadro):
        assert [t.id for t in quadro.tarefas] == [3, 2, 1]
        assert quadro.contagem() == {'to_do': 2, 'in_progress': 1, 'review': 0, 'completed': 0}

    def test_falha_na_busca_deixa_quadro_vazio(self):
        quadro = QuadroTarefas(repositorio=RepositorioFalso([tarefa(1, 'to_do')], falhar={'listar'}))

        assert quadro.carregar() == []
        assert all(grupo == [] for grupo in quadro.raias().values())


class TestMover:

    def test_mudanca_de_raia_gera_exatamente_uma_atualizacao(self, quadro, repositorio):
        sucesso, _, movida = quadro.mover(1, 'to_do', 'review')

        assert sucesso
        assert repositorio.atualizacoes == [(1, 'review')]
        assert movida.status == 'review'
        assert [t.id for t in quadro.raias()['review']] == [1]
        assert [t.id for t in quadro.raias()['to_do']] == [3]

    def test_mesma_raia_nao_persiste(self, quadro, repositorio):
        sucesso, _, _ = quadro.mover(3, 'to_do', 'to_do')

        assert sucesso
        assert repositorio.atualizacoes == []
        assert [t.id for t in quadro.raias()['to_do']] == [3, 1]

    def test_soltar_fora_do_quadro_nao_persiste(self, quadro, repositorio):
        sucesso, _, _ = quadro.mover(3, 'to_do', None)

        assert sucesso
        assert repositorio.atualizacoes == []

    def test_qualquer_raia_pode_ir_para_qualquer_outra(self, quadro, repositorio):
        quadro.mover(2, 'in_progress', 'completed')
        quadro.mover(2, 'completed', 'to_do')

        assert repositorio.atualizacoes == [(2, 'completed'), (2, 'to_do')]
        assert quadro.buscar(2).status == 'to_do'

    def test_raia_invalida_e_rejeitada(self, quadro, repositorio):
        sucesso, mensagem, tarefa_movida = quadro.mover(1, 'to_do', 'done')

        assert not sucesso
        assert mensagem == 'Raia inválida'
        assert tarefa_movida is None
        assert repositorio.atualizacoes == []

    def test_falha_ao_persistir_nao_altera_quadro_local(self, repositorio):
        repositorio.falhar = {'atualizar_status'}
        quadro = QuadroTarefas(repositorio=repositorio)
        quadro.carregar()

        sucesso, _, _ = quadro.mover(1, 'to_do', 'completed')

        assert not sucesso
        assert quadro.buscar(1).status == 'to_do'
        assert quadro.contagem()['completed'] == 0

    def test_buscar_aceita_id_como_texto(self, quadro):
        assert quadro.buscar('2').id == 2
        assert quadro.buscar(99) is None


class TestCriar:

    def test_cria_sempre_em_to_do_e_no_topo(self, quadro, repositorio):
        sucesso, _, criada = quadro.criar({
            'pedido': 'pedido-1',
            'nome': '  Layout da home  ',
            'status': 'completed',
        })

        assert sucesso
        assert criada.status == 'to_do'
        assert criada.nome == 'Layout da home'
        assert repositorio.insercoes[0]['status'] == 'to_do'
        assert quadro.tarefas[0] is criada
        assert quadro.raias()['to_do'][0] is criada

    def test_campos_opcionais_vazios_viram_nulos(self, quadro, repositorio):
        quadro.criar({'pedido': 'pedido-1', 'nome': 'Paleta', 'responsavel': '', 'prazo': ''})

        campos = repositorio.insercoes[0]
        assert campos['responsavel'] is None
        assert campos['prazo'] is None
        assert campos['descricao'] == ''

    @pytest.mark.parametrize('dados', [
        {'pedido': 'pedido-1', 'nome': ''},
        {'pedido': 'pedido-1', 'nome': '   '},
        {'pedido': None, 'nome': 'Paleta'},
        {},
    ])
    def test_pedido_e_nome_obrigatorios(self, quadro, repositorio, dados):
        sucesso, mensagem, criada = quadro.criar(dados)

        assert not sucesso
        assert mensagem == 'Informe o pedido e o nome da tarefa'
        assert criada is None
        assert repositorio.insercoes == []

    def test_falha_na_insercao_nao_altera_quadro(self, quadro, repositorio):
        repositorio.falhar = {'inserir'}

        sucesso, mensagem, criada = quadro.criar({'pedido': 'pedido-1', 'nome': 'Paleta'})

        assert not sucesso
        assert criada is None
        assert 'Tente novamente' in mensagem
        assert len(quadro.tarefas) == 3


class TestExcluir:

    def test_remove_do_quadro(self, quadro, repositorio):
        sucesso, _, excluida = quadro.excluir(2)

        assert sucesso
        assert excluida.id == 2
        assert repositorio.exclusoes == [2]
        assert quadro.buscar(2) is None

    def test_falha_mantem_tarefa(self, quadro, repositorio):
        repositorio.falhar = {'excluir'}

        sucesso, _, _ = quadro.excluir(2)

        assert not sucesso
        assert quadro.buscar(2) is not None


class TestInscricao:

    def test_inscritos_recebem_eventos(self, quadro):
        eventos = []
        quadro.inscrever(lambda evento, t: eventos.append((evento, t.id)))

        quadro.mover(1, 'to_do', 'review')
        quadro.mover(1, 'review', 'review')
        _, _, criada = quadro.criar({'pedido': 'pedido-1', 'nome': 'Nova'})
        quadro.excluir(3)

        assert eventos == [
            ('tarefa_movida', 1),
            ('tarefa_criada', criada.id),
            ('tarefa_excluida', 3),
        ]

    def test_falha_nao_notifica(self, repositorio):
        repositorio.falhar = {'atualizar_status', 'inserir'}
        quadro = QuadroTarefas(repositorio=repositorio)
        quadro.carregar()
        eventos = []
        quadro.inscrever(lambda evento, t: eventos.append(evento))

        quadro.mover(1, 'to_do', 'review')
        quadro.criar({'pedido': 'pedido-1', 'nome': 'Nova'})

        assert eventos == []

    def test_falha_de_inscrito_nao_desfaz_operacao(self, quadro, repositorio):
        recebidos = []

        def inscrito_quebrado(evento, t):
            raise ConnectionError('redis fora do ar')

        quadro.inscrever(inscrito_quebrado)
        quadro.inscrever(lambda evento, t: recebidos.append(evento))

        movida = quadro.mover(1, 'to_do', 'review')
        criada = quadro.criar({'pedido': 'pedido-1', 'nome': 'Nova'})
        excluida = quadro.excluir(3)

        assert [resultado[0] for resultado in (movida, criada, excluida)] == [True, True, True]
        assert repositorio.atualizacoes == [(1, 'review')]
        assert len(repositorio.insercoes) == 1
        assert recebidos == ['tarefa_movida', 'tarefa_criada', 'tarefa_excluida']


@pytest.mark.django_db
class TestQuadroComBanco:

    def test_mover_atualiza_carimbo_de_atualizacao(self, criar_tarefa):
        tarefa = criar_tarefa('Layout')
        antigo = timezone.now() - timedelta(days=3)
        Tarefa.objects.filter(pk=tarefa.pk).update(atualizado_em=antigo)

        quadro = QuadroTarefas()
        quadro.carregar()
        sucesso, _, _ = quadro.mover(tarefa.id, 'to_do', 'completed')

        tarefa.refresh_from_db()
        assert sucesso
        assert tarefa.status == 'completed'
        assert tarefa.atualizado_em > antigo
