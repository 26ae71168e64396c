from __future__ import annotations

import os

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from agrobi import load_config
from agrobi.auth import authenticate
from agrobi.connectors import connector_from_config, load_agro_products
from agrobi.errors import NoHistoricalDataError
from agrobi.market import (
    agro_kpis,
    average_by_region,
    average_by_year,
    list_regions,
    milk_kpis,
    prepare_agro_frame,
    region_evolution,
)
from agrobi.market.indicators import AGRO_INDEX_COLUMNS
from agrobi.pipeline import ForecastingEngine
from agrobi.suppliers import load_suppliers, scorecard_frame, search_suppliers
from agrobi.utils import configure_logging

st.set_page_config(page_title="AgroBI · Compras", page_icon="🥛", layout="wide")

CONFIG_PATH = os.environ.get("AGROBI_CONFIG")
CFG = load_config(CONFIG_PATH)
configure_logging(CFG.logging.level)

PRIMARY = "#507255"
ACCENT = "#488b49"
HIGHLIGHT = "#c5e063"
SEAM = "#d946ef"

STATE_COLORS = {
    "RS": "#197134", "SC": "#488b49", "PR": "#6eb257", "SP": "#9acd32", "MG": "#c5e063",
    "GO": "#d2ac31", "BA": "#dbb876", "ES": "#6d3617", "MS": "#a0522d", "RJ": "#8b4513",
}

PAGES = ["🏠 Início", "📊 Visão Analítica", "🧠 Forecasting", "🤝 Fornecedores"]


@st.cache_data
def load_milk_records():
    return connector_from_config(CFG.data).load_records()


@st.cache_data
def load_agro_frame() -> pd.DataFrame:
    return prepare_agro_frame(load_agro_products())


@st.cache_data
def load_supplier_table():
    return load_suppliers(CFG.data.suppliers_path)


def _base_layout(fig: go.Figure, height: int = 350) -> go.Figure:
    fig.update_layout(
        height=height,
        margin=dict(l=60, r=20, t=30, b=50),
        paper_bgcolor='rgba(0,0,0,0)',
        plot_bgcolor='rgba(0,0,0,0)',
        font=dict(color='#374151', size=12),
        hovermode='x unified',
    )
    fig.update_xaxes(showgrid=False)
    fig.update_yaxes(showgrid=True, gridcolor='#f0f0f0')
    return fig


def render_header(title: str, subtitle: str) -> None:
    st.markdown(f"""
    <div style='border-left: 4px solid {ACCENT}; padding-left: 1rem; margin: 0.5rem 0 1.25rem 0;'>
        <h2 style='font-size: 1.6rem; font-weight: 700; color: {PRIMARY}; margin: 0 0 0.25rem 0;'>{title}</h2>
        <p style='font-size: 0.85rem; color: #6b7280; margin: 0;'>{subtitle}</p>
    </div>
    """, unsafe_allow_html=True)


def render_login() -> None:
    render_header("Bem-vindo de volta", "Acesse sua conta para continuar.")
    with st.form("login"):
        email = st.text_input("Email", placeholder="seu.email@empresa.com")
        password = st.text_input("Senha", type="password", placeholder="********")
        submitted = st.form_submit_button("Entrar na Plataforma")

    if submitted:
        result = authenticate(email, password)
        if result.ok:
            st.session_state["authenticated"] = True
            st.rerun()
        else:
            st.error(result.message)


def render_welcome() -> None:
    render_header("Inteligência de Compras", "Leite, grãos, pecuária e cana & café em um só lugar.")
    cols = st.columns(3)
    cols[0].info("📊 **Visão Analítica**\n\nPreços históricos do leite e índices do agronegócio.")
    cols[1].info("🧠 **Forecasting**\n\nProjeção de preços para os próximos meses.")
    cols[2].info("🤝 **Fornecedores**\n\nScorecard dos parceiros de compra.")


def create_region_evolution_chart(df: pd.DataFrame, region: str) -> go.Figure:
    fig = go.Figure(go.Scatter(
        x=df['label'],
        y=df['price'],
        mode='lines',
        line=dict(color=STATE_COLORS.get(region, '#197134'), width=3),
        name=f'Preço em {region}',
        hovertemplate='R$ %{y:.2f}<extra></extra>',
    ))
    fig.update_yaxes(tickprefix='R$', tickformat='.2f')
    return _base_layout(fig)


def create_region_bar_chart(df: pd.DataFrame) -> go.Figure:
    fig = go.Figure(go.Bar(
        x=df['mean_price'],
        y=df['region'],
        orientation='h',
        marker=dict(color='#d2ac31'),
        text=[f"R${v:.2f}" for v in df['mean_price']],
        textposition='outside',
    ))
    fig.update_xaxes(visible=False)
    return _base_layout(fig, height=380)


def create_year_bar_chart(df: pd.DataFrame) -> go.Figure:
    fig = go.Figure(go.Bar(
        x=df['year'].astype(str),
        y=df['mean_price'],
        marker=dict(color=ACCENT),
        text=[f"R${v:.2f}" for v in df['mean_price']],
        textposition='outside',
    ))
    fig.update_yaxes(tickprefix='R$', tickformat='.2f')
    fig.update_traces(cliponaxis=False)
    return _base_layout(fig, height=380)


def render_milk_dashboard() -> None:
    records = load_milk_records()
    kpis = milk_kpis(records)

    cols = st.columns(4)
    cols[0].metric("Preço Médio Nacional (último mês)", f"R$ {kpis.national_average:.2f}")
    cols[1].metric("Maior Preço Registrado", f"R$ {kpis.max_price:.2f}")
    cols[2].metric("Menor Preço Registrado", f"R$ {kpis.min_price:.2f}")
    cols[3].metric("Estados com Registro (última data)", str(kpis.regions_reporting))

    regions = list_regions(records)
    if not regions:
        st.warning("Nenhum registro de preço disponível.")
        return

    region = st.selectbox("Estado", regions, key="milk_region")
    st.markdown(f"#### Evolução do preço em {region}")
    st.plotly_chart(create_region_evolution_chart(region_evolution(records, region), region),
                    use_container_width=True, key="milk_evolution")

    left, right = st.columns(2)
    with left:
        st.markdown("#### Preço médio por estado")
        st.plotly_chart(create_region_bar_chart(average_by_region(records)),
                        use_container_width=True, key="milk_by_region")
    with right:
        st.markdown("#### Preço médio por ano")
        st.plotly_chart(create_year_bar_chart(average_by_year(records)),
                        use_container_width=True, key="milk_by_year")


def render_agro_dashboard() -> None:
    df = load_agro_frame()
    kpis = agro_kpis(df)

    cols = st.columns(2)
    cols[0].metric("Cotação do Dólar (hoje)", f"R$ {kpis.dollar:.2f}")
    cols[1].metric("Valor do Boi Gordo (hoje)", f"R$ {kpis.live_cattle:.2f}")

    st.markdown("#### Correlação: Boi Gordo e Dólar")
    fig = go.Figure()
    fig.add_trace(go.Scatter(x=df['label'], y=df['valor_boigordo'], name='Boi Gordo',
                             line=dict(color='#6d3617', width=2)))
    fig.add_trace(go.Scatter(x=df['label'], y=df['Dolar'], name='Dólar', yaxis='y2',
                             line=dict(color='#d2ac31', width=2)))
    fig.update_layout(
        yaxis=dict(title='Preço (R$)'),
        yaxis2=dict(title='Dólar (R$)', overlaying='y', side='right', showgrid=False),
    )
    st.plotly_chart(_base_layout(fig), use_container_width=True, key="agro_correlation")

    st.markdown("#### Composição do Índice Geral de Preços do Agronegócio")
    fig = go.Figure()
    for col, name in AGRO_INDEX_COLUMNS.items():
        if col in df.columns:
            fig.add_trace(go.Scatter(x=df['label'], y=df[col], name=name, stackgroup='one', mode='lines'))
    st.plotly_chart(_base_layout(fig), use_container_width=True, key="agro_index")


def render_dashboard_page() -> None:
    render_header("Visão Analítica", "Dados integrados da base de dados.")
    milk_tab, agro_tab = st.tabs(["Preço do Leite", "Preços do Agronegócio"])
    with milk_tab:
        render_milk_dashboard()
    with agro_tab:
        render_agro_dashboard()


def create_forecast_chart(df: pd.DataFrame, seam_label: str) -> go.Figure:
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=df['label'], y=df['historical_value'], name='Preço Histórico', mode='lines',
        line=dict(color=PRIMARY, width=3),
    ))
    fig.add_trace(go.Scatter(
        x=df['label'], y=df['projection_line'], name='Previsão', mode='lines+markers',
        line=dict(color=HIGHLIGHT, width=3, dash='dash'), marker=dict(size=8),
    ))
    fig.add_vline(x=seam_label, line=dict(color=SEAM, dash='dot'))
    fig.add_annotation(x=seam_label, yref='paper', y=1.0, text='Início da Previsão',
                       showarrow=False, font=dict(color=SEAM, size=10), xanchor='left')
    fig.update_yaxes(tickprefix='R$', tickformat='.2f')
    return _base_layout(fig)


def create_factor_chart(factors) -> go.Figure:
    # Factors arrive ascending, so the biggest bar ends up on top.
    fig = go.Figure(go.Bar(
        x=[f.importance for f in factors],
        y=[f.name for f in factors],
        orientation='h',
        marker=dict(color=ACCENT),
        text=[f"{f.importance:g}%" for f in factors],
        textposition='outside',
    ))
    fig.update_xaxes(visible=False)
    return _base_layout(fig, height=300)


def render_forecast_page() -> None:
    render_header("Forecasting", "Projeção de preços do leite para os próximos meses.")
    form_col, result_col = st.columns([1, 3])

    with form_col:
        with st.form("forecast_params"):
            st.markdown("**Parâmetros da Previsão**")
            horizons = CFG.forecast.allowed_horizons or [1, 3, 6]
            months = st.selectbox("Período de Previsão", horizons,
                                  index=horizons.index(CFG.forecast.default_horizon)
                                  if CFG.forecast.default_horizon in horizons else 0,
                                  format_func=lambda m: f"{m} {'Mês' if m == 1 else 'Meses'}")
            submitted = st.form_submit_button("Gerar previsão")

    if submitted:
        engine = ForecastingEngine(CFG)
        with st.spinner("Processando..."):
            try:
                st.session_state["forecast"] = engine.forecast(int(months))
            except NoHistoricalDataError:
                st.session_state["forecast"] = None
                st.session_state["forecast_error"] = "Dados insuficientes para gerar a previsão."

    with result_col:
        result = st.session_state.get("forecast")
        if result is None:
            error = st.session_state.pop("forecast_error", None)
            if error:
                st.warning(error)
            else:
                st.info("Motor inativo. Configure os parâmetros ao lado para gerar uma nova projeção.")
            return

        st.markdown("#### Projeção de Preço do Leite (R$/L)")
        st.plotly_chart(create_forecast_chart(result.series.to_chart_frame(), result.series.seam_label),
                        use_container_width=True, key="forecast_chart")
        st.caption("Extrapolação determinística: crescimento composto a partir do último mês observado.")

        st.markdown("#### Fatores de Influência na Variação de Preço (Simulado)")
        st.plotly_chart(create_factor_chart(result.factors), use_container_width=True, key="factor_chart")


def render_suppliers_page() -> None:
    render_header("Fornecedores", "Gestão de parceiros logísticos")
    query = st.text_input("Buscar parceiro...", key="supplier_query")
    suppliers = search_suppliers(load_supplier_table(), query)
    st.dataframe(
        scorecard_frame(suppliers),
        use_container_width=True,
        hide_index=True,
        column_config={
            "Score": st.column_config.NumberColumn(
                "Score ⭐",
                help="O score é calculado com base na análise histórica da empresa como nossa fornecedora.",
                format="%.1f",
            )
        },
    )


def main():
    if not st.session_state.get("authenticated"):
        render_login()
        return

    with st.sidebar:
        st.markdown(f"<h3 style='color: {PRIMARY};'>🥛 AgroBI</h3>", unsafe_allow_html=True)
        page = st.radio("Navegação", PAGES, key="page", label_visibility="collapsed")
        if st.button("Sair"):
            st.session_state.clear()
            st.rerun()

    if page == PAGES[0]:
        render_welcome()
    elif page == PAGES[1]:
        render_dashboard_page()
    elif page == PAGES[2]:
        render_forecast_page()
    else:
        render_suppliers_page()


if __name__ == "__main__":
    main()
