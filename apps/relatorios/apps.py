# apps/relatorios/apps.py

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class RelatoriosConfig(AppConfig):
    """Configuração da app Relatórios"""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.relatorios'
    verbose_name = 'Relatórios - Exportação de tarefas'

    def ready(self):
        logger.info("📊 Relatórios App inicializada - exportações CSV, Excel e PDF")
