# apps/core/permissions.py

from functools import wraps

from django.contrib import messages
from django.core.exceptions import PermissionDenied
from django.shortcuts import redirect


class TarefasPermissions:
    """
    Permissões do quadro de tarefas
    Baseado nos tipos de usuário: admin, gerente, cliente
    """

    @staticmethod
    def is_gerente_ou_admin(user):
        """Verifica se é gerente ou admin"""
        return user.is_authenticated and user.tipo in ['admin', 'gerente']

    @staticmethod
    def pode_criar_tarefa(user):
        return TarefasPermissions.is_gerente_ou_admin(user)

    @staticmethod
    def pode_mover_tarefa(user):
        """Clientes apenas acompanham o quadro"""
        return user.is_authenticated and user.tipo != 'cliente'

    @staticmethod
    def pode_excluir_tarefa(user):
        return TarefasPermissions.is_gerente_ou_admin(user)

    @staticmethod
    def pode_exportar_relatorios(user):
        return TarefasPermissions.is_gerente_ou_admin(user)


# Decoradores para views

def requer_gerente_ou_admin(view_func):
    """Decorador que requer gerente ou admin"""

    @wraps(view_func)
    def wrapped_view(request, *args, **kwargs):
        if not TarefasPermissions.is_gerente_ou_admin(request.user):
            messages.error(request, 'Acesso negado. Apenas gerentes e administradores.')
            return redirect('core:painel')
        return view_func(request, *args, **kwargs)

    return wrapped_view


def ajax_requer_permissao(permission_check):
    """
    Decorador genérico para views AJAX/HTMX
    Retorna 403 ao invés de redirecionar
    """

    def decorator(view_func):
        @wraps(view_func)
        def wrapped_view(request, *args, **kwargs):
            if not permission_check(request.user):
                raise PermissionDenied("Você não tem permissão para esta ação.")
            return view_func(request, *args, **kwargs)

        return wrapped_view

    return decorator
