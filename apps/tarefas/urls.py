# apps/tarefas/urls.py

from django.urls import path
from . import views

app_name = 'tarefas'

urlpatterns = [
    # Quadro principal (kanban ou lista)
    path('', views.quadro_view, name='quadro'),

    # AJAX/HTMX - Movimentação por drag-and-drop
    path('mover/', views.mover_tarefa_ajax, name='mover'),

    # Criação de tarefas
    path('nova/', views.criar_tarefa_modal, name='criar'),

    # Exclusão
    path('<int:tarefa_id>/excluir/', views.excluir_tarefa, name='excluir'),

    # Card avulso para atualizações em tempo real
    path('<int:tarefa_id>/card/', views.card_tarefa, name='card'),

    # API JSON do quadro
    path('api/', views.api_quadro, name='api'),
]
