# apps/relatorios/views.py

import csv
from datetime import datetime
from io import BytesIO

from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.shortcuts import render

# Imports para PDF
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

# Imports para Excel
import xlsxwriter

from apps.core.permissions import TarefasPermissions, ajax_requer_permissao, requer_gerente_ou_admin
from .utils import (
    CABECALHO_TAREFAS,
    calcular_distribuicao_equipe,
    linha_tarefa,
    resumo_por_status,
    tarefas_atrasadas,
    tarefas_criadas_por_dia,
    tarefas_para_relatorio,
)


def _estilo_tabela(cor_cabecalho, cor_corpo):
    return TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), cor_cabecalho),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('ALIGN', (0, 0), (-1, -1), 'LEFT'),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, 0), 10),
        ('BOTTOMPADDING', (0, 0), (-1, 0), 8),
        ('BACKGROUND', (0, 1), (-1, -1), cor_corpo),
        ('GRID', (0, 0), (-1, -1), 1, colors.black)
    ])


@login_required
@requer_gerente_ou_admin
def dashboard_relatorios(request):
    """
    Dashboard dos relatórios
    Resumo por raia e carga da equipe, com links de exportação
    """
    tarefas = list(tarefas_para_relatorio())

    context = {
        'title': 'Relatórios - Tarefas',
        'resumo_status': resumo_por_status(tarefas),
        'distribuicao': calcular_distribuicao_equipe(),
        'atrasadas': tarefas_atrasadas(tarefas),
        'total_tarefas': len(tarefas),
    }

    return render(request, 'relatorios/dashboard.html', context)


@login_required
@requer_gerente_ou_admin
def exportar_tarefas_csv(request):
    """
    Exporta todas as tarefas para CSV
    """
    response = HttpResponse(content_type='text/csv; charset=utf-8')
    response['Content-Disposition'] = 'attachment; filename="tarefas.csv"'
    response.write('\ufeff')  # BOM para UTF-8

    writer = csv.writer(response)
    writer.writerow(CABECALHO_TAREFAS)

    for tarefa in tarefas_para_relatorio():
        writer.writerow(linha_tarefa(tarefa))

    return response


@login_required
@requer_gerente_ou_admin
def exportar_tarefas_excel(request):
    """
    Exporta tarefas para Excel (XLSX)
    Uma aba de resumo e uma aba por raia do quadro
    """
    tarefas = list(tarefas_para_relatorio())

    output = BytesIO()
    workbook = xlsxwriter.Workbook(output, {'in_memory': True})

    # Formatos
    header_format = workbook.add_format({
        'bold': True,
        'font_color': 'white',
        'bg_color': '#366092',
        'border': 1
    })
    cell_format = workbook.add_format({'border': 1})
    percent_format = workbook.add_format({'num_format': '0.0"%"', 'border': 1})

    # Aba 1: Resumo por status
    resumo_sheet = workbook.add_worksheet('Resumo')
    resumo_sheet.write('A1', 'RELATÓRIO DE TAREFAS', header_format)
    resumo_sheet.write('A3', 'Status', header_format)
    resumo_sheet.write('B3', 'Tarefas', header_format)
    resumo_sheet.write('C3', 'Percentual', header_format)

    resumo = resumo_por_status(tarefas)
    for row, item in enumerate(resumo, 3):
        resumo_sheet.write(row, 0, item['titulo'], cell_format)
        resumo_sheet.write(row, 1, item['total'], cell_format)
        resumo_sheet.write(row, 2, item['percentual'], percent_format)

    resumo_sheet.write(len(resumo) + 3, 0, 'Total', header_format)
    resumo_sheet.write(len(resumo) + 3, 1, len(tarefas), header_format)

    # Abas por raia
    sheets = [resumo_sheet]
    for item in resumo:
        sheet = workbook.add_worksheet(item['titulo'])
        sheets.append(sheet)

        for col, header in enumerate(CABECALHO_TAREFAS):
            sheet.write(0, col, header, header_format)

        linhas = [linha_tarefa(t) for t in tarefas if t.status == item['status']]
        for row, linha in enumerate(linhas, 1):
            for col, valor in enumerate(linha):
                sheet.write(row, col, valor, cell_format)

    # Ajustar largura das colunas
    for sheet in sheets:
        sheet.set_column('A:J', 18)

    workbook.close()
    output.seek(0)

    response = HttpResponse(
        output.read(),
        content_type='application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
    )
    response['Content-Disposition'] = 'attachment; filename="tarefas.xlsx"'

    return response


@login_required
@requer_gerente_ou_admin
def relatorio_tarefas_pdf(request):
    """
    Gera relatório do quadro de tarefas em PDF
    """
    tarefas = list(tarefas_para_relatorio())

    response = HttpResponse(content_type='application/pdf')
    response['Content-Disposition'] = 'attachment; filename="relatorio_tarefas.pdf"'

    doc = SimpleDocTemplate(response, pagesize=landscape(A4))
    story = []

    # Estilos
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        'CustomTitle',
        parent=styles['Heading1'],
        fontSize=20,
        spaceAfter=30,
        textColor=colors.darkblue
    )
    heading_style = ParagraphStyle(
        'CustomHeading',
        parent=styles['Heading2'],
        fontSize=14,
        spaceAfter=12,
        textColor=colors.darkblue
    )

    story.append(Paragraph("Relatório de Tarefas", title_style))
    story.append(Paragraph(f"Gerado em: {datetime.now().strftime('%d/%m/%Y %H:%M')}", styles['Normal']))
    story.append(Spacer(1, 20))

    # Resumo por raia
    story.append(Paragraph("Tarefas por status", heading_style))
    status_data = [['Status', 'Tarefas', '%']]
    for item in resumo_por_status(tarefas):
        status_data.append([item['titulo'], str(item['total']), f"{item['percentual']:.1f}%"])

    status_table = Table(status_data)
    status_table.setStyle(_estilo_tabela(colors.blue, colors.lightblue))
    story.append(status_table)
    story.append(Spacer(1, 20))

    # Equipe
    story.append(Paragraph("Carga da equipe", heading_style))
    distribuicao = calcular_distribuicao_equipe()
    if distribuicao:
        equipe_data = [['Membro', 'Total', 'Abertas', 'Concluídas']]
        for item in distribuicao:
            equipe_data.append([item['membro'], str(item['total']), str(item['abertas']), str(item['concluidas'])])

        equipe_table = Table(equipe_data)
        equipe_table.setStyle(_estilo_tabela(colors.green, colors.lightgreen))
        story.append(equipe_table)
    else:
        story.append(Paragraph("Nenhum membro de equipe cadastrado.", styles['Normal']))
    story.append(Spacer(1, 20))

    # Tarefas atrasadas
    story.append(Paragraph("Tarefas atrasadas", heading_style))
    atrasadas = tarefas_atrasadas(tarefas)
    if atrasadas:
        atrasadas_data = [['Tarefa', 'Cliente', 'Responsável', 'Prazo', 'Status']]
        for tarefa in atrasadas:
            atrasadas_data.append([
                tarefa.nome,
                tarefa.pedido.cliente.nome,
                tarefa.responsavel.nome if tarefa.responsavel else '-',
                tarefa.prazo.strftime('%d/%m/%Y'),
                tarefa.get_status_display(),
            ])

        atrasadas_table = Table(atrasadas_data)
        atrasadas_table.setStyle(_estilo_tabela(colors.red, colors.mistyrose))
        story.append(atrasadas_table)
    else:
        story.append(Paragraph("Nenhuma tarefa atrasada.", styles['Normal']))

    # Rodapé
    story.append(Spacer(1, 30))
    story.append(Paragraph("Relatório gerado pelo Vortex Gestão", styles['Normal']))

    doc.build(story)
    return response


@login_required
@ajax_requer_permissao(TarefasPermissions.pode_exportar_relatorios)
def api_metricas_tarefas(request):
    """
    API JSON com as métricas do quadro
    """
    tarefas = list(tarefas_para_relatorio())

    return JsonResponse({
        'por_status': resumo_por_status(tarefas),
        'por_membro': calcular_distribuicao_equipe(),
        'criadas_por_dia': tarefas_criadas_por_dia(settings.VORTEX_RELATORIOS_DIAS),
        'atrasadas': len(tarefas_atrasadas(tarefas)),
        'total': len(tarefas),
    })
