# apps/relatorios/__init__.py

"""
Relatórios - Exportação do quadro de tarefas do Vortex Gestão

Funcionalidades:
- Relatório em PDF (ReportLab)
- Exportação CSV/Excel
- Métricas por status e por membro da equipe
"""
