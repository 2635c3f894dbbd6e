# config/urls.py

from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    # Admin
    path('admin/', admin.site.urls),

    # Aplicações principais
    path('', include('apps.core.urls')),
    path('tarefas/', include('apps.tarefas.urls')),
    path('relatorios/', include('apps.relatorios.urls')),

    # Redirecionamentos úteis
    path('quadro/', RedirectView.as_view(pattern_name='tarefas:quadro', permanent=False)),
]

# Customizar títulos do admin
admin.site.site_header = 'Vortex Gestão Admin'
admin.site.site_title = 'Vortex Gestão'
admin.site.index_title = 'Administração do Sistema'
