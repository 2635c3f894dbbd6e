# apps/tarefas/routing.py

from django.urls import re_path
from . import consumers

# Rotas WebSocket do quadro de tarefas
websocket_urlpatterns = [
    re_path(r'ws/tarefas/$', consumers.TarefasConsumer.as_asgi()),
]
