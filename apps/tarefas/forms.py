# apps/tarefas/forms.py

from django import forms
from django.core.exceptions import ValidationError

from apps.core.models import Tarefa
from .repositorio import RepositorioMembros, RepositorioPedidos


class NovaTarefaForm(forms.ModelForm):
    """Formulário do diálogo 'Nova Tarefa'"""

    class Meta:
        model = Tarefa
        fields = ['pedido', 'nome', 'descricao', 'responsavel', 'prazo']
        labels = {
            'pedido': 'Pedido vinculado',
            'nome': 'Nome da tarefa',
            'descricao': 'Descrição',
            'responsavel': 'Responsável',
            'prazo': 'Prazo',
        }
        widgets = {
            'pedido': forms.Select(attrs={
                'class': 'form-select w-full px-4 py-2 border rounded-lg',
                'data-obrigatorio': 'true',
            }),
            'nome': forms.TextInput(attrs={
                'class': 'form-input w-full px-4 py-2 border rounded-lg',
                'placeholder': 'Nome da tarefa',
                'data-obrigatorio': 'true',
            }),
            'descricao': forms.Textarea(attrs={
                'class': 'form-textarea w-full px-4 py-2 border rounded-lg',
                'rows': 3,
                'placeholder': 'Descrição detalhada da tarefa',
            }),
            'responsavel': forms.Select(attrs={
                'class': 'form-select w-full px-4 py-2 border rounded-lg',
            }),
            'prazo': forms.DateInput(attrs={
                'class': 'form-input w-full px-4 py-2 border rounded-lg',
                'type': 'date',
            }),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        # Apenas pedidos pendentes ou em andamento
        self.fields['pedido'].queryset = RepositorioPedidos().listar_elegiveis()
        self.fields['pedido'].empty_label = 'Escolha o pedido'

        self.fields['responsavel'].queryset = RepositorioMembros().listar_atribuiveis()
        self.fields['responsavel'].empty_label = 'Escolha o responsável'
        self.fields['responsavel'].required = False

    def clean_nome(self):
        nome = (self.cleaned_data.get('nome') or '').strip()
        if not nome:
            raise ValidationError("O nome da tarefa é obrigatório")
        return nome
