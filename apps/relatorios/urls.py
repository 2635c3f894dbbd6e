# apps/relatorios/urls.py

from django.urls import path
from . import views

app_name = 'relatorios'

urlpatterns = [
    # Dashboard principal
    path('', views.dashboard_relatorios, name='dashboard'),

    # Exportações do quadro de tarefas
    path('tarefas/pdf/', views.relatorio_tarefas_pdf, name='tarefas_pdf'),
    path('tarefas/csv/', views.exportar_tarefas_csv, name='tarefas_csv'),
    path('tarefas/excel/', views.exportar_tarefas_excel, name='tarefas_excel'),

    # APIs para dashboards
    path('api/metricas/', views.api_metricas_tarefas, name='api_metricas'),
]
