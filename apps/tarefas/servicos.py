# apps/tarefas/servicos.py

"""
Serviço do Quadro de Tarefas - Encapsula o estado do quadro de uma sessão

A view é dona de uma instância de QuadroTarefas: carrega as tarefas,
aplica criações e movimentações e é avisada das mudanças por inscrição.
Nenhum método levanta exceção para erros de armazenamento; todos
retornam (sucesso, mensagem, tarefa).
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from django.core.exceptions import ObjectDoesNotExist
from django.db import DatabaseError

from .quadro import agrupar_por_status, contar_por_status, eh_status_valido
from .repositorio import RepositorioTarefas

logger = logging.getLogger(__name__)

Resultado = Tuple[bool, str, Optional[object]]

ERROS_ARMAZENAMENTO = (DatabaseError, ObjectDoesNotExist)


class QuadroTarefas:
    """
    Estado em memória do quadro Kanban

    Princípios aplicados:
    - Atualização otimista: o estado local só muda depois que o banco confirma
    - Sem rollback: falhas de persistência são registradas e o fluxo segue
    - Último a escrever vence: não há controle de concorrência entre sessões
    """

    def __init__(self, repositorio=None):
        self._repositorio = repositorio or RepositorioTarefas()
        self._tarefas: List = []
        self._inscritos: List[Callable] = []

    # === CONSULTA ===

    @property
    def tarefas(self) -> List:
        return list(self._tarefas)

    def carregar(self) -> List:
        """
        Busca todas as tarefas; em caso de falha o quadro fica vazio
        """
        try:
            self._tarefas = list(self._repositorio.listar())
        except ERROS_ARMAZENAMENTO as e:
            logger.error(f"❌ Erro ao buscar tarefas: {e}")
            self._tarefas = []
        return self.tarefas

    def raias(self) -> Dict[str, List]:
        return agrupar_por_status(self._tarefas)

    def contagem(self) -> Dict[str, int]:
        return contar_por_status(self.raias())

    def buscar(self, tarefa_id):
        for tarefa in self._tarefas:
            if str(tarefa.id) == str(tarefa_id):
                return tarefa
        return None

    # === INSCRIÇÃO ===

    def inscrever(self, callback: Callable) -> None:
        """Registra callback(evento, tarefa) para mudanças de estado"""
        self._inscritos.append(callback)

    def _notificar(self, evento: str, tarefa) -> None:
        """A mudança já foi persistida: falha de um inscrito só é registrada"""
        for callback in self._inscritos:
            try:
                callback(evento, tarefa)
            except Exception as e:
                logger.error(f"❌ Erro ao notificar {evento} da tarefa {tarefa.id}: {e}")

    # === MUTAÇÕES ===

    def criar(self, dados: Dict) -> Resultado:
        """
        Cria tarefa sempre em 'to_do', vinculada a um pedido

        Args:
            dados: Dict com pedido, nome e opcionalmente descricao,
                   responsavel e prazo

        Returns:
            Tuple[sucesso, mensagem, tarefa_criada]
        """
        nome = (dados.get('nome') or '').strip()
        pedido = dados.get('pedido')

        if not pedido or not nome:
            return False, "Informe o pedido e o nome da tarefa", None

        try:
            tarefa = self._repositorio.inserir(
                pedido=pedido,
                nome=nome,
                descricao=dados.get('descricao') or '',
                responsavel=dados.get('responsavel') or None,
                prazo=dados.get('prazo') or None,
                status='to_do',
            )
        except ERROS_ARMAZENAMENTO as e:
            logger.error(f"❌ Erro ao criar tarefa '{nome}': {e}")
            return False, "Erro ao criar a tarefa. Tente novamente.", None

        self._tarefas.insert(0, tarefa)
        logger.info(f"✅ Tarefa criada: {tarefa.nome} (id={tarefa.id})")
        self._notificar('tarefa_criada', tarefa)

        return True, "Tarefa criada com sucesso!", tarefa

    def atualizar_status(self, tarefa_id, status) -> Resultado:
        """
        Persiste o novo status e, só depois, atualiza o quadro local
        """
        if not eh_status_valido(status):
            return False, f"Status inválido: {status}", None

        try:
            self._repositorio.atualizar_status(tarefa_id, status)
        except ERROS_ARMAZENAMENTO as e:
            logger.error(f"❌ Erro ao atualizar status da tarefa {tarefa_id}: {e}")
            return False, "Erro ao atualizar o status da tarefa", None

        tarefa = self.buscar(tarefa_id)
        if tarefa is not None:
            logger.info(f"🔀 Tarefa '{tarefa.nome}' movida de {tarefa.status} para {status}")
            tarefa.status = status
            if status == 'completed':
                logger.info(f"✅ Tarefa '{tarefa.nome}' foi concluída!")
            self._notificar('tarefa_movida', tarefa)

        return True, "Status atualizado", tarefa

    def mover(self, tarefa_id, origem, destino) -> Resultado:
        """
        Trata o fim de um arraste de card

        Qualquer raia pode ir para qualquer outra. Só há persistência
        quando a raia de destino é diferente da de origem; a ordem dentro
        da raia nunca é salva.
        """
        if not destino:
            return True, "Movimento cancelado", self.buscar(tarefa_id)

        if not eh_status_valido(origem) or not eh_status_valido(destino):
            logger.warning(f"⚠️ Movimento com raia inválida: {origem} -> {destino}")
            return False, "Raia inválida", None

        if origem == destino:
            return True, "Tarefa permanece na mesma raia", self.buscar(tarefa_id)

        return self.atualizar_status(tarefa_id, destino)

    def excluir(self, tarefa_id) -> Resultado:
        try:
            self._repositorio.excluir(tarefa_id)
        except ERROS_ARMAZENAMENTO as e:
            logger.error(f"❌ Erro ao excluir tarefa {tarefa_id}: {e}")
            return False, "Erro ao excluir a tarefa", None

        tarefa = self.buscar(tarefa_id)
        if tarefa is not None:
            self._tarefas.remove(tarefa)
            self._notificar('tarefa_excluida', tarefa)

        return True, "Tarefa excluída", tarefa
