"""Shared styles for all dashboard pages."""

import streamlit as st

SHARED_CSS = """
<style>
@import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap');

* {
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, sans-serif !important;
}

#MainMenu, footer {visibility: hidden;}

.main .block-container {
    padding: 1.5rem 2.5rem;
    max-width: 1400px;
}

.page-title {
    font-size: 2.2rem;
    font-weight: 800;
    text-align: center;
    margin-bottom: 0.4rem;
}

.page-subtitle {
    color: #64748b;
    font-size: 1.05rem;
    text-align: center;
    margin-bottom: 2rem;
}

.section-title {
    font-size: 1.4rem;
    font-weight: 600;
    margin: 0.5rem 0 0.25rem 0;
}

.chart-title {
    font-weight: 600;
    margin: 1rem 0 0.5rem 0;
}

/* ===== SAVINGS CARDS ===== */
.metrics-row {
    display: grid;
    grid-template-columns: repeat(2, 1fr);
    gap: 1rem;
    margin-bottom: 1rem;
}

.metric-card {
    border-radius: 12px;
    padding: 1.25rem 1.5rem;
    border: 1px solid rgba(40, 167, 69, 0.35);
    background: linear-gradient(135deg, rgba(40, 167, 69, 0.12) 0%, rgba(40, 167, 69, 0.04) 100%);
}

.metric-card.primary {
    border-color: rgba(31, 78, 121, 0.35);
    background: linear-gradient(135deg, rgba(31, 78, 121, 0.12) 0%, rgba(31, 78, 121, 0.04) 100%);
}

.metric-label {
    color: #64748b;
    font-size: 0.85rem;
    font-weight: 500;
}

.metric-value {
    font-size: 2rem;
    font-weight: 700;
    color: #16a34a;
}

.metric-card.primary .metric-value {
    color: #1F4E79;
}

.metric-caption {
    color: #64748b;
    font-size: 0.75rem;
    margin-top: 0.25rem;
}

/* ===== BREAKDOWN LINES ===== */
.breakdown-line {
    display: flex;
    justify-content: space-between;
    align-items: center;
    font-size: 0.9rem;
    padding: 0.3rem 0;
}

.breakdown-line .old-cost {
    text-decoration: line-through;
    color: #94a3b8;
    margin-right: 0.5rem;
}

.breakdown-line .new-cost {
    font-weight: 600;
    color: #16a34a;
}

.breakdown-line .badge {
    font-size: 0.75rem;
    color: #16a34a;
    background: rgba(40, 167, 69, 0.12);
    padding: 2px 8px;
    border-radius: 6px;
    margin-left: 0.5rem;
}

/* ===== INFO BOXES ===== */
.info-box {
    padding: 1rem 1.25rem;
    border-radius: 10px;
    margin: 0.5rem 0;
    border-left: 4px solid #1F4E79;
    background: rgba(31, 78, 121, 0.06);
}

.info-box.warning {
    border-left-color: #f59e0b;
    background: rgba(245, 158, 11, 0.08);
}

.empty-state {
    text-align: center;
    padding: 4rem 2rem;
    border-radius: 12px;
    background: rgba(100, 116, 139, 0.06);
}

.empty-state h3 {
    margin-bottom: 0.5rem;
}

/* Tab styling */
.stTabs [data-baseweb="tab-list"] {
    gap: 8px;
}

.stTabs [data-baseweb="tab"] {
    border-radius: 8px 8px 0 0;
    padding: 10px 20px;
}

.stTabs [aria-selected="true"] {
    background-color: #1F4E79 !important;
    color: white !important;
}
</style>
"""


def inject_styles():
    """Inject shared CSS styles into the page."""
    st.markdown(SHARED_CSS, unsafe_allow_html=True)


def page_header(title, subtitle=None):
    """Render a consistent page header."""
    st.markdown(f'<div class="page-title">{title}</div>', unsafe_allow_html=True)
    if subtitle:
        st.markdown(f'<div class="page-subtitle">{subtitle}</div>', unsafe_allow_html=True)


def section_header(title):
    """Render a section header."""
    st.markdown(f'<div class="section-title">{title}</div>', unsafe_allow_html=True)


def chart_header(title):
    """Render a chart header."""
    st.markdown(f'<div class="chart-title">{title}</div>', unsafe_allow_html=True)


def metric_card(value, label, caption="", color=""):
    """Render a savings card."""
    return f"""
    <div class="metric-card {color}">
        <div class="metric-label">{label}</div>
        <div class="metric-value">{value}</div>
        <div class="metric-caption">{caption}</div>
    </div>
    """


def metrics_row(metrics):
    """Render a row of metric cards.

    Args:
        metrics: List of tuples (value, label, caption, color)
    """
    cards = "".join([metric_card(*m) for m in metrics])
    return f'<div class="metrics-row">{cards}</div>'


def breakdown_line(label, old_value, new_value, badge):
    """Render one 'your cost -> provider cost' line."""
    return f"""
    <div class="breakdown-line">
        <span>{label}:</span>
        <span>
            <span class="old-cost">{old_value}</span>&rarr;
            <span class="new-cost">{new_value}</span>
            <span class="badge">{badge}</span>
        </span>
    </div>
    """


def info_box(content, box_type="info"):
    """Render an info box."""
    return f'<div class="info-box {box_type}">{content}</div>'
