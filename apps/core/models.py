# apps/core/models.py

from django.contrib.auth.models import AbstractUser
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import Q
from django.utils import timezone


class Usuario(AbstractUser):
    """
    Modelo de usuário customizado

    O tipo define o que o usuário pode fazer no painel:
    administradores e gerentes operam o quadro, clientes apenas consultam.
    """

    TIPO_CHOICES = [
        ('admin', 'Administrador'),
        ('gerente', 'Gerente'),
        ('cliente', 'Cliente'),
    ]

    telefone = models.CharField(max_length=20, blank=True)
    whatsapp = models.CharField(max_length=20, blank=True)
    tipo = models.CharField(max_length=20, choices=TIPO_CHOICES, default='gerente')

    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'usuario'
        indexes = [
            models.Index(fields=['tipo']),
        ]

    def __str__(self):
        return self.get_full_name() or self.username


class Cliente(models.Model):
    """Cliente atendido pela agência"""

    nome = models.CharField(max_length=200)
    email = models.EmailField(blank=True)
    telefone = models.CharField(max_length=20, blank=True)
    ativo = models.BooleanField(default=True)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'cliente'
        ordering = ['nome']

    def __str__(self):
        return self.nome


class Servico(models.Model):
    """Serviço do catálogo (ex: gestão de redes sociais)"""

    nome = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    preco_base = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=0,
        validators=[MinValueValidator(0)]
    )
    ativo = models.BooleanField(default=True)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'servico'
        ordering = ['nome']

    def __str__(self):
        return self.nome


class Pedido(models.Model):
    """
    Pedido de um cliente por um serviço

    Toda tarefa nasce de um pedido. Apenas pedidos pendentes ou em
    andamento podem receber novas tarefas.
    """

    STATUS_CHOICES = [
        ('pending', 'Pendente'),
        ('in_progress', 'Em Andamento'),
        ('completed', 'Concluído'),
        ('cancelled', 'Cancelado'),
    ]

    STATUS_ELEGIVEIS_TAREFA = ['pending', 'in_progress']

    cliente = models.ForeignKey(
        Cliente,
        on_delete=models.PROTECT,
        related_name='pedidos'
    )
    servico = models.ForeignKey(
        Servico,
        on_delete=models.PROTECT,
        related_name='pedidos'
    )
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='pending')
    observacoes = models.TextField(blank=True)
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'pedido'
        ordering = ['-criado_em']
        indexes = [
            models.Index(fields=['status']),
        ]

    def __str__(self):
        return f"{self.servico.nome} - {self.cliente.nome}"

    def aceita_tarefas(self):
        """Verifica se o pedido ainda pode receber tarefas"""
        return self.status in self.STATUS_ELEGIVEIS_TAREFA


class MembroEquipe(models.Model):
    """Membro da equipe que pode ser responsável por tarefas"""

    usuario = models.OneToOneField(
        Usuario,
        on_delete=models.CASCADE,
        related_name='membro_equipe'
    )
    cargo = models.CharField(max_length=100, blank=True)
    ativo = models.BooleanField(default=True)
    criado_em = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'membro_equipe'
        ordering = ['usuario__first_name', 'usuario__username']

    def __str__(self):
        return self.nome

    @property
    def nome(self):
        return self.usuario.get_full_name() or self.usuario.username


class Tarefa(models.Model):
    """
    Tarefa do quadro Kanban

    O status é o único fator que define a raia do quadro onde a tarefa
    aparece. A constraint garante que nenhuma tarefa fique fora das
    quatro raias.
    """

    STATUS_CHOICES = [
        ('to_do', 'A Fazer'),
        ('in_progress', 'Em Progresso'),
        ('review', 'Em Revisão'),
        ('completed', 'Concluído'),
    ]

    nome = models.CharField(max_length=200)
    descricao = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='to_do')
    prazo = models.DateField(null=True, blank=True)
    responsavel = models.ForeignKey(
        MembroEquipe,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='tarefas'
    )
    pedido = models.ForeignKey(
        Pedido,
        on_delete=models.PROTECT,
        related_name='tarefas'
    )
    criado_em = models.DateTimeField(auto_now_add=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'tarefa'
        ordering = ['-criado_em', '-id']
        indexes = [
            models.Index(fields=['status']),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(status__in=['to_do', 'in_progress', 'review', 'completed']),
                name='tarefa_status_valido',
            ),
        ]

    def __str__(self):
        return f"{self.nome} ({self.get_status_display()})"

    @property
    def cliente_nome(self):
        return self.pedido.cliente.nome

    @property
    def servico_nome(self):
        return self.pedido.servico.nome

    def esta_atrasada(self):
        """Verifica se a tarefa passou do prazo sem ser concluída"""
        if self.prazo and self.status != 'completed':
            return timezone.localdate() > self.prazo
        return False
