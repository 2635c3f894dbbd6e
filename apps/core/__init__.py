# apps/core/__init__.py

"""
Core - Aplicação principal do Vortex Gestão

Contém:
- Models de negócio (Cliente, Servico, Pedido, MembroEquipe, Tarefa)
- Sistema de permissões customizado
- Painel principal e health check
- Comando de seed para desenvolvimento
"""
