# apps/__init__.py

"""
Vortex Gestão - Aplicações Django

Este pacote contém todas as aplicações do sistema:
- core: Models principais (clientes, pedidos, equipe, tarefas)
- tarefas: Quadro Kanban de tarefas e WebSockets
- relatorios: Exportação de tarefas em PDF, CSV e Excel
"""

__version__ = '0.2.0'
__author__ = 'Equipe Vórtex'
