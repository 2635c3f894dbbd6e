# apps/tarefas/apps.py

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class TarefasConfig(AppConfig):
    """Configuração da app Tarefas"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tarefas'
    verbose_name = 'Tarefas - Kanban'

    def ready(self):
        logger.info("🔌 Tarefas App inicializada - WebSockets habilitados")
