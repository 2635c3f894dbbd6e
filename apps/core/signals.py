# apps/core/signals.py

import logging

from django.db.models.signals import post_save, pre_save
from django.dispatch import receiver

from .models import Pedido, Tarefa, Usuario, MembroEquipe

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=Tarefa)
def registrar_mudanca_status(sender, instance, **kwargs):
    """
    Registra em log quando uma tarefa salva pelo admin muda de raia

    O arraste do quadro usa update() e registra a mudança no QuadroTarefas.
    """
    if not instance.pk:
        return

    status_anterior = sender.objects.filter(pk=instance.pk).values_list('status', flat=True).first()
    if status_anterior and status_anterior != instance.status:
        logger.info(f"🔀 Tarefa '{instance.nome}' movida de {status_anterior} para {instance.status}")

        if instance.status == 'completed':
            logger.info(f"✅ Tarefa '{instance.nome}' foi concluída!")


@receiver(pre_save, sender=Tarefa)
def avisar_pedido_inelegivel(sender, instance, **kwargs):
    """
    Novas tarefas só podem ser vinculadas a pedidos ativos
    """
    if not instance.pk and instance.pedido_id and not instance.pedido.aceita_tarefas():
        logger.warning(
            f"⚠️ Tarefa '{instance.nome}' criada para pedido {instance.pedido_id} "
            f"com status {instance.pedido.status}"
        )


@receiver(post_save, sender=Usuario)
def criar_membro_equipe(sender, instance, created, **kwargs):
    """
    Gerentes e administradores entram automaticamente na equipe
    """
    if created and instance.tipo in ['admin', 'gerente']:
        MembroEquipe.objects.get_or_create(usuario=instance)


@receiver(post_save, sender=Pedido)
def log_pedido_concluido(sender, instance, created, **kwargs):
    if not created and instance.status == 'completed':
        logger.info(f"📦 Pedido {instance} concluído")
