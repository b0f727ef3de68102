"""Streamlit dashboard main application."""

import io
import logging
import sys
from datetime import date
from pathlib import Path

import streamlit as st

# Add project root and dashboard directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

from savings_calculator.config.assumptions import AssumptionsError, get_assumptions, load_assumptions
from savings_calculator.cost.calculator import CostComparisonResult, MerchantInput, SavingsCalculator
from savings_calculator.input.form import INPUT_FIELDS, can_calculate, parse_merchant_input
from savings_calculator.output.excel_generator import ExcelGenerator
from savings_calculator.output.report import ReportBranding, ReportGenerationError, SavingsReport
from savings_calculator.output.report_data import (
    build_breakdown_frame,
    build_package_frame,
    build_timeline_frame,
)
from savings_calculator.utils.helpers import (
    format_currency,
    format_percentage,
    load_config,
    setup_logging,
)

from components.charts import (
    create_package_comparison_bar,
    create_savings_timeline,
    create_service_comparison_bar,
)
from styles import breakdown_line, chart_header, info_box, inject_styles, metrics_row, page_header, section_header

st.set_page_config(
    page_title="Roots Fulfillment Savings Calculator",
    page_icon="📦",
    layout="wide",
    initial_sidebar_state="collapsed"
)
inject_styles()

logger = logging.getLogger("savings_calculator.dashboard")


def load_settings():
    """Load config and assumptions once per session."""
    if "config" not in st.session_state:
        config_error = None
        try:
            config = load_config()
        except FileNotFoundError as e:
            config = {}
            config_error = e
        log_config = config.get("logging") or {}
        setup_logging(log_config.get("level", "INFO"), log_config.get("format"))
        if config_error:
            logger.warning(f"{config_error}; using defaults")
        st.session_state["config"] = config

    if "assumptions" not in st.session_state:
        try:
            st.session_state["assumptions"] = load_assumptions()
        except AssumptionsError as e:
            st.error(f"Invalid assumptions file, using built-in defaults: {e}")
            st.session_state["assumptions"] = get_assumptions()

    return st.session_state["config"], st.session_state["assumptions"]


def init_session_state():
    """Initialize session state variables."""
    for key in INPUT_FIELDS:
        if key not in st.session_state:
            st.session_state[key] = 0.0
    if "show_results" not in st.session_state:
        st.session_state["show_results"] = False


def reset_results():
    """Hide results whenever an input changes; Calculate must be pressed again."""
    st.session_state["show_results"] = False


def current_input() -> MerchantInput:
    """Read the merchant input from the form widgets."""
    return parse_merchant_input({key: st.session_state.get(key) for key in INPUT_FIELDS})


def render_input_panel() -> MerchantInput:
    """Render the input form and the Calculate button."""
    section_header("🧮 Calculate Your Savings")
    st.caption("Add your warehouse details below to calculate potential savings from optimized fulfillment operations.")

    for key, field in INPUT_FIELDS.items():
        st.number_input(
            field.label,
            min_value=0.0,
            step=field.step,
            format="%.1f" if field.step < 1 else "%.0f",
            key=key,
            placeholder=field.placeholder,
            on_change=reset_results,
        )

    merchant_input = current_input()
    ready = can_calculate(merchant_input)

    if st.button("Calculate Savings", type="primary", use_container_width=True, disabled=not ready):
        st.session_state["show_results"] = True

    if not ready:
        st.caption("Enter a value greater than zero in every field to calculate.")

    return merchant_input


def render_empty_state():
    """Placeholder shown until results are requested."""
    st.markdown("""
    <div class="empty-state">
        <h3>📉 Your Savings Await</h3>
        <p>Enter your business details on the left and click "Calculate Savings"
        to see how much you could save with Roots.</p>
    </div>
    """, unsafe_allow_html=True)


def render_downloads(
    merchant_input: MerchantInput,
    result: CostComparisonResult,
    branding: ReportBranding
):
    """Download and contact buttons for one package."""
    report = SavingsReport(merchant_input, result, branding, generated_at=date.today())
    key_prefix = result.package.value

    col1, col2, col3 = st.columns(3)

    with col1:
        try:
            pdf_bytes = report.to_pdf()
        except ReportGenerationError as e:
            logger.error(str(e))
            st.warning("Could not generate the PDF report. Please try again.")
        else:
            st.download_button(
                label="📄 Download Report",
                data=pdf_bytes,
                file_name=report.default_filename("pdf"),
                mime="application/pdf",
                key=f"{key_prefix}-pdf",
                use_container_width=True,
            )

    with col2:
        st.download_button(
            label="📝 Download Text",
            data=report.to_text(),
            file_name=report.default_filename("txt"),
            mime="text/plain",
            key=f"{key_prefix}-txt",
            use_container_width=True,
        )

    with col3:
        st.link_button("✉️ Contact Sales", branding.contact_url, use_container_width=True)


def render_package_breakdown(
    merchant_input: MerchantInput,
    result: CostComparisonResult,
    branding: ReportBranding
):
    """Savings cards, chart, and detailed lines for one package."""
    symbol = branding.currency_symbol
    savings = result.savings
    pct_text = f"{format_percentage(savings.percentage)} less than in-house"

    st.markdown(metrics_row([
        (format_currency(savings.monthly, symbol, max_decimals=0), "Monthly Savings", pct_text, ""),
        (format_currency(savings.yearly, symbol, max_decimals=0), "Yearly Savings",
         f"{pct_text} • Over 12 months", "primary"),
    ]), unsafe_allow_html=True)

    chart_header("Cost Breakdown Comparison")
    breakdown = build_breakdown_frame(result)
    st.plotly_chart(
        create_service_comparison_bar(breakdown, branding.provider_name),
        use_container_width=True,
        key=f"{result.package.value}-chart",
    )

    chart_header("Detailed Cost Analysis")
    lines = "".join(
        breakdown_line(
            line.service.label,
            format_currency(line.merchant_cost, symbol, max_decimals=0),
            format_currency(line.alternate_cost, symbol, max_decimals=0),
            f"-{format_percentage(line.savings_pct)}",
        )
        for line in result.service_savings()
    )
    st.markdown(lines, unsafe_allow_html=True)

    st.markdown("---")
    render_downloads(merchant_input, result, branding)


def render_results(
    merchant_input: MerchantInput,
    calculator: SavingsCalculator,
    branding: ReportBranding,
    timeline_months: int
):
    """Package tabs plus the cross-package comparison."""
    section_header("📉 Your Potential Savings")
    st.caption("Compare packages to find the best fit for your needs")

    # Recomputed on every rerun from the current widgets, so the latest input always wins
    results = calculator.compare_packages(merchant_input)

    tabs = st.tabs([package.short_label for package in results])
    for tab, (package, result) in zip(tabs, results.items()):
        with tab:
            render_package_breakdown(merchant_input, result, branding)

    with st.expander("📊 Compare all packages"):
        packages = build_package_frame(calculator, results)
        st.plotly_chart(
            create_package_comparison_bar(packages, branding.provider_name),
            use_container_width=True,
        )

        best = max(results.values(), key=lambda r: r.savings.monthly)
        st.markdown(info_box(
            f"<strong>{best.package_config.label}</strong> saves the most: "
            f"{format_currency(best.savings.monthly, branding.currency_symbol)} per month "
            f"({format_percentage(best.savings.percentage)})."
        ), unsafe_allow_html=True)

        chart_header("Cumulative Savings")
        timeline = calculator.generate_timeline(best, months=timeline_months)
        st.plotly_chart(create_savings_timeline(build_timeline_frame(timeline)), use_container_width=True)

        buffer = io.BytesIO()
        ExcelGenerator(buffer).generate(merchant_input, calculator, results)
        st.download_button(
            label="📊 Download Excel Comparison",
            data=buffer.getvalue(),
            file_name=f"{branding.file_prefix}-{date.today().isoformat()}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        )


def main():
    config, assumptions = load_settings()
    init_session_state()

    branding = ReportBranding.from_config(config)
    timeline_months = (config.get("dashboard") or {}).get("timeline_months", 12)
    calculator = SavingsCalculator(assumptions)

    page_header(
        "📦 Roots Fulfillment Savings Calculator",
        "Calculate your potential savings by optimizing your warehouse operations. "
        "Enter your details below to see how much you could save with Roots."
    )

    col_input, col_results = st.columns([1, 1], gap="large")

    with col_input:
        merchant_input = render_input_panel()

    with col_results:
        if st.session_state["show_results"] and can_calculate(merchant_input):
            render_results(merchant_input, calculator, branding, timeline_months)
        else:
            render_empty_state()


main()
