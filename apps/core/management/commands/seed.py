# apps/core/management/commands/seed.py

from datetime import timedelta

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from apps.core.models import Cliente, MembroEquipe, Pedido, Servico, Tarefa, Usuario

CLIENTES = [
    ('Padaria Pão Quente', 'contato@paoquente.com.br', '(11) 98888-1111'),
    ('Clínica Sorriso', 'agenda@clinicasorriso.com.br', '(11) 97777-2222'),
    ('Academia Movimento', 'adm@academiamovimento.com.br', '(11) 96666-3333'),
]

SERVICOS = [
    ('Site institucional', 'Site responsivo com até 5 páginas', 3500),
    ('Gestão de redes sociais', 'Planejamento e publicação mensal', 1800),
    ('Identidade visual', 'Logo, paleta e manual de marca', 2400),
]

EQUIPE = [
    ('ana', 'Ana', 'Souza', 'Designer'),
    ('bruno', 'Bruno', 'Lima', 'Desenvolvedor'),
]

# (nome, status, dias até o prazo)
TAREFAS = [
    ('Briefing com o cliente', 'completed', -10),
    ('Wireframes das páginas', 'review', -1),
    ('Layout da home', 'in_progress', 3),
    ('Calendário de posts', 'to_do', 7),
    ('Paleta de cores', 'to_do', 5),
    ('Revisão de textos', 'in_progress', None),
]


class Command(BaseCommand):
    help = 'Popula o banco com dados de demonstração do quadro de tarefas'

    def add_arguments(self, parser):
        parser.add_argument(
            '--limpar',
            action='store_true',
            help='Remove tarefas, pedidos e clientes existentes antes de popular'
        )

    def handle(self, *args, **options):
        if not settings.DEBUG:
            raise CommandError('🚫 O seed só pode ser executado em modo DEBUG')

        with transaction.atomic():
            if options['limpar']:
                self._limpar()

            if Tarefa.objects.exists():
                self.stdout.write(self.style.WARNING(
                    '⚠️  Já existem tarefas no banco. Use --limpar para recriar os dados demo.'
                ))
                return

            clientes = self._criar_clientes()
            servicos = self._criar_servicos()
            membros = self._criar_equipe()
            pedidos = self._criar_pedidos(clientes, servicos)
            total = self._criar_tarefas(pedidos, membros)

        self.stdout.write(self.style.SUCCESS(
            f'✅ Dados demo criados: {len(clientes)} clientes, {len(pedidos)} pedidos, '
            f'{len(membros)} membros e {total} tarefas'
        ))

    def _limpar(self):
        self.stdout.write('🗑️  Removendo dados existentes...')
        Tarefa.objects.all().delete()
        Pedido.objects.all().delete()
        Cliente.objects.all().delete()
        Servico.objects.all().delete()

    def _criar_clientes(self):
        self.stdout.write('  👥 Criando clientes...')
        return [
            Cliente.objects.get_or_create(nome=nome, defaults={'email': email, 'telefone': telefone})[0]
            for nome, email, telefone in CLIENTES
        ]

    def _criar_servicos(self):
        self.stdout.write('  🧰 Criando serviços...')
        return [
            Servico.objects.get_or_create(nome=nome, defaults={'descricao': descricao, 'preco_base': preco})[0]
            for nome, descricao, preco in SERVICOS
        ]

    def _criar_equipe(self):
        """Usuários gerentes ganham o MembroEquipe pelo signal de criação"""
        self.stdout.write('  🧑‍💻 Criando equipe...')
        membros = []
        for username, first_name, last_name, cargo in EQUIPE:
            usuario, criado = Usuario.objects.get_or_create(
                username=username,
                defaults={
                    'first_name': first_name,
                    'last_name': last_name,
                    'email': f'{username}@vortex.com.br',
                    'tipo': 'gerente',
                }
            )
            if criado:
                usuario.set_password('vortex123')
                usuario.save()

            membro, _ = MembroEquipe.objects.get_or_create(usuario=usuario)
            membro.cargo = cargo
            membro.save()
            membros.append(membro)

        return membros

    def _criar_pedidos(self, clientes, servicos):
        self.stdout.write('  📦 Criando pedidos...')
        status_pedidos = ['in_progress', 'pending', 'in_progress']
        return [
            Pedido.objects.create(cliente=cliente, servico=servico, status=status)
            for cliente, servico, status in zip(clientes, servicos, status_pedidos)
        ]

    def _criar_tarefas(self, pedidos, membros):
        self.stdout.write('  📋 Criando tarefas...')
        hoje = timezone.localdate()

        for indice, (nome, status, dias) in enumerate(TAREFAS):
            Tarefa.objects.create(
                nome=nome,
                descricao=f'{nome} ({pedidos[indice % len(pedidos)].cliente.nome})',
                status=status,
                prazo=hoje + timedelta(days=dias) if dias is not None else None,
                pedido=pedidos[indice % len(pedidos)],
                responsavel=membros[indice % len(membros)],
            )

        return len(TAREFAS)
