# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin
from django.utils import timezone
from django.utils.html import format_html
from django.utils.safestring import mark_safe

from apps.tarefas.quadro import STATUS_TAREFA
from .models import Cliente, MembroEquipe, Pedido, Servico, Tarefa, Usuario

CORES_STATUS = {raia['status']: raia['cor'] for raia in STATUS_TAREFA}


def _badge(cor, texto):
    return format_html(
        '<span style="background-color: {}; color: white; '
        'padding: 3px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
        cor, texto
    )


@admin.register(Usuario)
class UsuarioAdmin(BaseUserAdmin):
    """Admin customizado para o modelo Usuario"""

    list_display = [
        'username', 'email', 'get_full_name', 'tipo_badge',
        'is_active', 'date_joined'
    ]
    list_filter = ['tipo', 'is_staff', 'is_active', 'date_joined']
    search_fields = ['username', 'first_name', 'last_name', 'email']
    ordering = ['-date_joined']

    fieldsets = BaseUserAdmin.fieldsets + (
        ('Informações Adicionais', {
            'fields': ('tipo', 'telefone', 'whatsapp')
        }),
    )

    add_fieldsets = BaseUserAdmin.add_fieldsets + (
        ('Informações Adicionais', {
            'fields': ('tipo', 'telefone')
        }),
    )

    def tipo_badge(self, obj):
        """Exibe o tipo de usuário com badge colorido"""
        cores = {
            'admin': '#EF4444',  # vermelho
            'gerente': '#F59E0B',  # amarelo
            'cliente': '#3B82F6'  # azul
        }
        return _badge(cores.get(obj.tipo, '#6B7280'), obj.get_tipo_display())

    tipo_badge.short_description = 'Tipo'


@admin.register(Cliente)
class ClienteAdmin(admin.ModelAdmin):
    list_display = ['nome', 'email', 'telefone', 'pedidos_count', 'ativo', 'criado_em']
    list_filter = ['ativo', 'criado_em']
    search_fields = ['nome', 'email', 'telefone']

    def pedidos_count(self, obj):
        return obj.pedidos.count()

    pedidos_count.short_description = 'Pedidos'


@admin.register(Servico)
class ServicoAdmin(admin.ModelAdmin):
    list_display = ['nome', 'preco_base', 'ativo']
    list_filter = ['ativo']
    search_fields = ['nome', 'descricao']


class TarefaInline(admin.TabularInline):
    """Tarefas do pedido"""
    model = Tarefa
    extra = 0
    fields = ['nome', 'status', 'responsavel', 'prazo']


@admin.register(Pedido)
class PedidoAdmin(admin.ModelAdmin):
    """Admin para pedidos"""

    list_display = ['id', 'cliente', 'servico', 'status', 'tarefas_count', 'criado_em']
    list_filter = ['status', 'servico', 'criado_em']
    search_fields = ['cliente__nome', 'servico__nome', 'observacoes']
    readonly_fields = ['criado_em', 'atualizado_em']
    inlines = [TarefaInline]

    def tarefas_count(self, obj):
        """Conta tarefas do pedido"""
        return obj.tarefas.count()

    tarefas_count.short_description = 'Tarefas'


@admin.register(MembroEquipe)
class MembroEquipeAdmin(admin.ModelAdmin):
    list_display = ['nome', 'cargo', 'tarefas_abertas', 'ativo']
    list_filter = ['ativo']
    search_fields = ['usuario__username', 'usuario__first_name', 'cargo']

    def tarefas_abertas(self, obj):
        return obj.tarefas.exclude(status='completed').count()

    tarefas_abertas.short_description = 'Tarefas abertas'


@admin.register(Tarefa)
class TarefaAdmin(admin.ModelAdmin):
    """Admin para tarefas"""

    list_display = [
        'id', 'nome', 'status_badge', 'pedido',
        'responsavel', 'status_prazo', 'criado_em'
    ]
    list_filter = ['status', 'responsavel', 'criado_em']
    search_fields = ['nome', 'descricao', 'pedido__cliente__nome']
    date_hierarchy = 'criado_em'
    list_select_related = ['pedido__cliente', 'pedido__servico', 'responsavel__usuario']
    readonly_fields = ['criado_em', 'atualizado_em']

    fieldsets = (
        ('Informações Básicas', {
            'fields': ('nome', 'descricao', 'pedido', 'responsavel', 'status', 'prazo')
        }),
        ('Datas', {
            'fields': ('criado_em', 'atualizado_em'),
            'classes': ('collapse',)
        })
    )

    def status_badge(self, obj):
        """Badge colorido para a raia da tarefa"""
        return _badge(CORES_STATUS.get(obj.status, '#6B7280'), obj.get_status_display())

    status_badge.short_description = 'Status'

    def status_prazo(self, obj):
        """Status do prazo"""
        if not obj.prazo:
            return '-'

        if obj.status == 'completed':
            return mark_safe('<span style="color: green;">✓ Concluído</span>')

        if obj.esta_atrasada():
            dias = (timezone.localdate() - obj.prazo).days
            return format_html(
                '<span style="color: red;">⚠️ Atrasada {} dias</span>',
                dias
            )

        dias = (obj.prazo - timezone.localdate()).days
        if dias == 0:
            return mark_safe('<span style="color: orange;">⏰ Vence hoje</span>')
        elif dias == 1:
            return mark_safe('<span style="color: orange;">⏰ Vence amanhã</span>')
        else:
            return f"Em {dias} dias"

    status_prazo.short_description = 'Prazo'
