# apps/tarefas/views.py

import json
import logging

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, render
from django.views.decorators.http import require_GET, require_http_methods, require_POST

from apps.core.permissions import TarefasPermissions, ajax_requer_permissao
from .forms import NovaTarefaForm
from .notificacoes import NotificadorQuadro, serializar_tarefa
from .quadro import STATUS_TAREFA, agrupar_por_status, contar_por_status, filtrar_tarefas, montar_colunas
from .repositorio import RepositorioTarefas
from .servicos import QuadroTarefas

logger = logging.getLogger(__name__)

MODOS_EXIBICAO = ['kanban', 'lista']

# Partial e alvo HTMX do item recém-criado em cada modo
INSERCAO_POR_MODO = {
    'kanban': ('tarefas/partials/card_tarefa.html', '.raia[data-status="to_do"]'),
    'lista': ('tarefas/partials/item_lista.html', '#lista-tarefas'),
}


def _quadro_da_sessao(request):
    """Cria o quadro da requisição já inscrito no notificador WebSocket"""
    quadro = QuadroTarefas()
    quadro.inscrever(NotificadorQuadro(request.user))
    return quadro


def _modo_exibicao(modo):
    return modo if modo in MODOS_EXIBICAO else 'kanban'


@login_required
@require_GET
def quadro_view(request):
    """
    View principal do quadro de tarefas
    Modo kanban (padrão) ou lista, com busca opcional
    """
    quadro = QuadroTarefas()
    tarefas = quadro.carregar()

    termo = request.GET.get('q', '').strip()
    modo = _modo_exibicao(request.GET.get('modo'))

    tarefas_filtradas = filtrar_tarefas(tarefas, termo)
    raias = agrupar_por_status(tarefas_filtradas)

    context = {
        'title': 'Gestão de Tarefas',
        'modo': modo,
        'termo': termo,
        'colunas': montar_colunas(raias),
        'tarefas': tarefas_filtradas,
        'total_tarefas': len(tarefas_filtradas),
        'status_tarefa': STATUS_TAREFA,
        'pode_criar': TarefasPermissions.pode_criar_tarefa(request.user),
        'pode_mover': TarefasPermissions.pode_mover_tarefa(request.user),
        'pode_excluir': TarefasPermissions.pode_excluir_tarefa(request.user),
        'websocket_path': settings.VORTEX_TAREFAS_WS_PATH,
    }

    return render(request, 'tarefas/quadro.html', context)


@login_required
@require_POST
@ajax_requer_permissao(TarefasPermissions.pode_mover_tarefa)
def mover_tarefa_ajax(request):
    """
    Trata o fim do arraste de um card entre raias
    Usado pelo drag-and-drop do quadro
    """
    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return JsonResponse({'success': False, 'error': 'JSON inválido'}, status=400)

    tarefa_id = data.get('tarefa_id')
    origem = data.get('origem')
    destino = data.get('destino')

    # Validar parâmetros
    if not tarefa_id or not origem:
        return JsonResponse({'success': False, 'error': 'Parâmetros inválidos'}, status=400)

    try:
        tarefa_id = int(tarefa_id)
    except (TypeError, ValueError):
        return JsonResponse({'success': False, 'error': 'Tarefa inválida'}, status=400)

    quadro = _quadro_da_sessao(request)
    quadro.carregar()

    sucesso, mensagem, tarefa = quadro.mover(tarefa_id, origem, destino)

    if not sucesso:
        # Sem rollback: o card fica onde o usuário soltou
        return JsonResponse({'success': False, 'error': mensagem})

    return JsonResponse({
        'success': True,
        'message': mensagem,
        'tarefa': serializar_tarefa(tarefa) if tarefa else None,
        'contagem': quadro.contagem(),
    })


@login_required
@require_http_methods(["GET", "POST"])
@ajax_requer_permissao(TarefasPermissions.pode_criar_tarefa)
def criar_tarefa_modal(request):
    """
    Diálogo para criar nova tarefa
    Em caso de erro o diálogo é renderizado de novo, ainda aberto
    """
    if request.method == 'GET':
        return render(request, 'tarefas/partials/nova_tarefa_modal.html', {
            'form': NovaTarefaForm(),
            'modo': _modo_exibicao(request.GET.get('modo')),
        })

    form = NovaTarefaForm(request.POST)
    modo = _modo_exibicao(request.POST.get('modo'))

    if not form.is_valid():
        return _resposta_erro_criacao(request, form, modo, 'Preencha os campos obrigatórios')

    quadro = _quadro_da_sessao(request)
    sucesso, mensagem, tarefa = quadro.criar(form.cleaned_data)

    if not sucesso:
        return _resposta_erro_criacao(request, form, modo, mensagem)

    if request.htmx:
        template, alvo = INSERCAO_POR_MODO[modo]
        response = render(request, template, {
            'tarefa': tarefa,
            'pode_excluir': TarefasPermissions.pode_excluir_tarefa(request.user),
        })
        # Nova tarefa entra no topo (raia 'to_do' ou lista) e o diálogo fecha no cliente
        response['HX-Retarget'] = alvo
        response['HX-Reswap'] = 'afterbegin'
        response['HX-Trigger'] = 'tarefaCriada'
        return response

    return JsonResponse({
        'success': True,
        'message': mensagem,
        'tarefa': serializar_tarefa(tarefa),
    }, status=201)


def _resposta_erro_criacao(request, form, modo, mensagem):
    if request.htmx:
        return render(request, 'tarefas/partials/nova_tarefa_modal.html', {
            'form': form,
            'modo': modo,
            'erro': mensagem,
        })

    return JsonResponse({
        'success': False,
        'error': mensagem,
        'campos': form.errors.get_json_data(),
    }, status=400)


@login_required
@require_POST
@ajax_requer_permissao(TarefasPermissions.pode_excluir_tarefa)
def excluir_tarefa(request, tarefa_id):
    """
    Exclui tarefa via AJAX/HTMX
    """
    quadro = _quadro_da_sessao(request)
    quadro.carregar()

    sucesso, mensagem, _ = quadro.excluir(tarefa_id)

    if not sucesso:
        return JsonResponse({'success': False, 'error': mensagem}, status=404)

    return JsonResponse({'success': True, 'message': mensagem})


@login_required
@require_GET
def api_quadro(request):
    """
    API JSON do quadro: raias com contagem e tarefas
    """
    quadro = QuadroTarefas()
    tarefas = filtrar_tarefas(quadro.carregar(), request.GET.get('q', ''))
    raias = agrupar_por_status(tarefas)

    return JsonResponse({
        'raias': [
            {
                'status': coluna['status'],
                'titulo': coluna['titulo'],
                'total': coluna['total'],
                'tarefas': [serializar_tarefa(t) for t in coluna['tarefas']],
            }
            for coluna in montar_colunas(raias)
        ],
        'contagem': contar_por_status(raias),
        'total': len(tarefas),
    })


@login_required
@require_GET
def card_tarefa(request, tarefa_id):
    """
    Card de uma tarefa criada em outra sessão (avisada via WebSocket)
    """
    tarefa = get_object_or_404(RepositorioTarefas().consulta(), pk=tarefa_id)

    return render(request, 'tarefas/partials/card_tarefa.html', {
        'tarefa': tarefa,
        'pode_excluir': TarefasPermissions.pode_excluir_tarefa(request.user),
    })
