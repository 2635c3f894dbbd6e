# apps/tarefas/repositorio.py

"""
Acesso a dados do quadro de tarefas

Repositórios finos sobre o ORM. Não tratam erros: qualquer falha do
banco sobe como DatabaseError (ou DoesNotExist) para o serviço do quadro.
"""

from django.utils import timezone

from apps.core.models import MembroEquipe, Pedido, Tarefa


class RepositorioTarefas:
    """Leitura e escrita de tarefas"""

    def consulta(self):
        """Tarefas com pedido, cliente, serviço e responsável já carregados"""
        return Tarefa.objects.select_related(
            'pedido__cliente',
            'pedido__servico',
            'responsavel__usuario',
        ).order_by('-criado_em', '-id')

    def listar(self):
        return list(self.consulta())

    def inserir(self, **campos):
        tarefa = Tarefa.objects.create(**campos)
        # Recarregar com os relacionamentos usados pelos cards
        return self.consulta().get(pk=tarefa.pk)

    def atualizar_status(self, tarefa_id, status):
        """Atualiza status e atualizado_em; o último a escrever vence"""
        # update() ignora auto_now
        atualizadas = Tarefa.objects.filter(pk=tarefa_id).update(
            status=status,
            atualizado_em=timezone.now(),
        )
        if not atualizadas:
            raise Tarefa.DoesNotExist(f"Tarefa {tarefa_id} não encontrada")

    def excluir(self, tarefa_id):
        excluidas, _ = Tarefa.objects.filter(pk=tarefa_id).delete()
        if not excluidas:
            raise Tarefa.DoesNotExist(f"Tarefa {tarefa_id} não encontrada")


class RepositorioPedidos:
    """Pedidos que podem receber tarefas"""

    def listar_elegiveis(self):
        return Pedido.objects.select_related('cliente', 'servico').filter(
            status__in=Pedido.STATUS_ELEGIVEIS_TAREFA
        )


class RepositorioMembros:
    """Membros da equipe que podem ser responsáveis"""

    def listar_atribuiveis(self):
        return MembroEquipe.objects.select_related('usuario').filter(
            ativo=True,
            usuario__is_active=True
        )
