# apps/tarefas/__init__.py

"""
Tarefas - Quadro Kanban do Vortex Gestão

Funcionalidades:
- Quadro Kanban com quatro raias fixas por status
- Movimentação de tarefas por drag-and-drop
- Criação de tarefas vinculadas a pedidos
- WebSockets para atualizações em tempo real
"""
