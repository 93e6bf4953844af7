"""
Streamlit UI for the PV Calculator.

Features:
- Pricing parameters in the sidebar
- Editable PV rows (add / edit / delete)
- Calculation table with market check status
- Client quote text with download and CSV export
"""
import streamlit as st
import pandas as pd
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from pv_calculator.engine import (
    CheckStatus,
    PricingEngine,
    PricingParameters,
    QuoteRequest,
    format_amount,
)
from pv_calculator.config.settings import get_settings
from pv_calculator.services import PVRowList, rows_to_csv


st.set_page_config(
    page_title="VK Cars — Калькулятор ПВ",
    layout="wide",
    initial_sidebar_state="expanded"
)

REFERENCE_HINT = "За ориентир необходимо брать условия по любому авто с аналогичной рыночной стоимостью"

STATUS_BADGES = {
    CheckStatus.GOOD: ("🟢", "В норме (90-110%)"),
    CheckStatus.WARNING: ("🟠", "Предупреждение (80-90% или 110-120%)"),
    CheckStatus.BAD: ("🔴", "Вне нормы (<80% или >120%)"),
}


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine()


@st.cache_resource
def get_settings_cached():
    """Get cached settings."""
    return get_settings()


engine = get_engine()
settings = get_settings_cached()

if 'pv_rows' not in st.session_state:
    st.session_state.pv_rows = PVRowList(settings.pv_values)

pv_rows: PVRowList = st.session_state.pv_rows


# ============================================================================
# SIDEBAR: Pricing Parameters
# ============================================================================
with st.sidebar:
    st.header("Основные параметры")

    with st.container(border=True):
        client_name = st.text_input("Имя клиента", value=settings.client_name)
        car_model = st.text_input("Авто", value=settings.car_model)
        car_price = st.number_input(
            "Стоимость автомобиля (ориентир) (₽)",
            min_value=0.0, value=float(settings.car_price), step=50_000.0,
            help="Рыночная стоимость для сверки"
        )
        deposit = st.number_input(
            "Депозит (₽)", min_value=0.0, value=float(settings.deposit), step=10_000.0,
            help=REFERENCE_HINT
        )

    with st.container(border=True):
        rate_at_zero = st.number_input(
            "Базовая ставка при ПВ=0 (>15дн) (₽/сут)",
            min_value=0.0, value=float(settings.rate_at_zero), step=50.0,
            help=REFERENCE_HINT
        )
        diff_under_15 = st.number_input(
            "Разница ставок для <15дн (₽)",
            min_value=0.0, value=float(settings.diff_under_15), step=50.0
        )
        # Zero days or months would divide by zero in the engine
        days_in_month = st.number_input(
            "Дней в месяце", min_value=0.5, value=float(settings.days_in_month), step=0.5
        )
        months = st.number_input(
            "Срок выкупа (мес)", min_value=1, value=int(settings.months), step=1,
            help=REFERENCE_HINT
        )

params = PricingParameters(
    car_price=car_price,
    deposit=deposit,
    rate_at_zero=rate_at_zero,
    diff_under_15=diff_under_15,
    days_in_month=days_in_month,
    months=int(months),
)


# ============================================================================
# MAIN CONTENT
# ============================================================================
st.title("VK Cars — Калькулятор ПВ")

col1, col2 = st.columns([1, 2.2], gap="large")

with col1:
    st.subheader("Суммы ПВ")

    # The editor keeps its own edits relative to the frame it was created
    # with, so the frame only changes together with the editor key
    if 'pv_editor_version' not in st.session_state:
        st.session_state.pv_editor_version = 0
        st.session_state.pv_editor_base = pv_rows.rows

    def _reset_editor():
        st.session_state.pv_editor_version += 1
        st.session_state.pv_editor_base = pv_rows.rows
        st.rerun()

    edited_df = st.data_editor(
        pd.DataFrame({
            'ID': [r.id for r in st.session_state.pv_editor_base],
            'ПВ (₽)': [r.pv for r in st.session_state.pv_editor_base],
        }),
        use_container_width=True,
        num_rows="dynamic",
        column_config={
            "ID": st.column_config.NumberColumn("№", disabled=True),
            "ПВ (₽)": st.column_config.NumberColumn("ПВ (₽)", step=50_000, format="%d")
        },
        hide_index=True,
        key=f"pv_editor_{st.session_state.pv_editor_version}"
    )
    # Rows added in the grid have no ID yet
    edited_entries = [
        (None if pd.isna(row_id) else int(row_id), 0.0 if pd.isna(pv) else float(pv))
        for row_id, pv in zip(edited_df['ID'], edited_df['ПВ (₽)'])
    ]
    if edited_entries != [(r.id, r.pv) for r in pv_rows]:
        if pv_rows.sync(edited_entries):
            _reset_editor()

    if st.button("➕ Добавить ПВ", type="primary"):
        pv_rows.add()
        _reset_editor()

request = QuoteRequest(
    params=params,
    rows=pv_rows.rows,
    client_name=client_name,
    car_model=car_model,
)
result = engine.calculate(request)

with col2:
    st.subheader("Расчёты по ПВ")

    display_data = []
    for row in result.rows:
        badge, label = STATUS_BADGES[row.check_status]
        display_data.append({
            'ПВ (₽)': format_amount(row.pv),
            'Ставка >15дн (₽/сут)': format_amount(row.rate_over_15),
            'Округление >15дн': format_amount(row.rate_over_15_rounded),
            'Ставка <15дн (₽/сут)': format_amount(row.rate_under_15_rounded),
            'Выкупная стоимость (₽)': format_amount(row.total_buyout),
            'Сверка (₽)': format_amount(row.market_check),
            'Процент от стоимости авто': f"{badge} {row.percent_from_car_price:.1f}%",
            'Статус': label,
        })

    st.dataframe(pd.DataFrame(display_data), use_container_width=True, hide_index=True)
    st.caption("Сверка: значение должно быть примерно равно рыночной стоимости или немного выше неё")

    for warning in result.warnings:
        st.warning(warning)

    with st.expander("🔍 Детали расчёта"):
        for row in result.rows:
            st.caption(f"**ПВ {format_amount(row.pv)} ₽**")
            st.code(row.get_trace_text(), language=None)

    st.download_button(
        "📥 CSV",
        data=rows_to_csv(result.rows),
        file_name="pv_quote.csv",
        mime="text/csv",
    )


# ============================================================================
# CLIENT TEXT
# ============================================================================
st.divider()
st.subheader("Текст для отправки клиенту")

quote_text = engine.build_quote(request)
st.text_area("Текст", value=quote_text, height=320, label_visibility="collapsed")
st.download_button(
    "📋 Скачать текст",
    data=quote_text,
    file_name="quote.txt",
    mime="text/plain",
)
