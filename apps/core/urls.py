# apps/core/urls.py

from django.contrib.auth import views as auth_views
from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    # === AUTENTICAÇÃO ===
    path('login/', auth_views.LoginView.as_view(), name='login'),
    path('logout/', auth_views.LogoutView.as_view(), name='logout'),

    # === PAINEL PRINCIPAL ===
    path('painel/', views.painel_principal, name='painel'),
    path('', views.painel_principal, name='home'),

    # === MONITORAMENTO ===
    path('health/', views.health_check, name='health'),
]
