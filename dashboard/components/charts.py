"""Reusable chart components for the dashboard."""

import plotly.graph_objects as go
import pandas as pd

YOUR_COST_COLOR = "#dc3545"
ROOTS_COST_COLOR = "#28a745"


def create_service_comparison_bar(
    breakdown: pd.DataFrame,
    provider_name: str = "Roots"
) -> go.Figure:
    """Create a grouped bar chart of merchant vs. provider cost per service.

    Args:
        breakdown: DataFrame from build_breakdown_frame
        provider_name: Label for the provider series

    Returns:
        Plotly figure
    """
    if breakdown.empty:
        return go.Figure()

    fig = go.Figure(data=[
        go.Bar(
            name="Your Cost",
            x=breakdown["Service"],
            y=breakdown["Your Cost"],
            marker_color=YOUR_COST_COLOR
        ),
        go.Bar(
            name=f"{provider_name} Cost",
            x=breakdown["Service"],
            y=breakdown["Roots Cost"],
            marker_color=ROOTS_COST_COLOR
        )
    ])

    fig.update_layout(
        barmode="group",
        yaxis_title="Monthly Cost ($)",
        height=320,
        legend=dict(orientation="h", yanchor="bottom", y=-0.3),
        margin=dict(t=10, b=10, l=10, r=10)
    )

    return fig


def create_package_comparison_bar(
    packages: pd.DataFrame,
    provider_name: str = "Roots"
) -> go.Figure:
    """Create a bar chart of total monthly cost per package.

    Args:
        packages: DataFrame from build_package_frame
        provider_name: Label for the provider series

    Returns:
        Plotly figure
    """
    if packages.empty:
        return go.Figure()

    fig = go.Figure(data=[
        go.Bar(
            name="Your Cost",
            x=packages["label"],
            y=packages["merchant_total"],
            marker_color=YOUR_COST_COLOR
        ),
        go.Bar(
            name=f"{provider_name} Cost",
            x=packages["label"],
            y=packages["roots_total"],
            marker_color=ROOTS_COST_COLOR,
            text=[f"-{pct:.1f}%" for pct in packages["savings_pct"]],
            textposition="outside"
        )
    ])

    fig.update_layout(
        barmode="group",
        yaxis_title="Monthly Cost ($)",
        showlegend=True
    )

    return fig


def create_savings_timeline(timeline: pd.DataFrame) -> go.Figure:
    """Create a cumulative savings projection.

    Args:
        timeline: DataFrame from build_timeline_frame

    Returns:
        Plotly figure
    """
    fig = go.Figure()

    fig.add_trace(go.Scatter(
        x=timeline["month"],
        y=timeline["cumulative_savings"],
        mode='lines+markers',
        name='Cumulative Savings',
        line=dict(color='#28a745', width=3),
        fill='tozeroy',
        fillcolor='rgba(40, 167, 69, 0.2)'
    ))

    fig.update_layout(
        xaxis_title="Month",
        yaxis_title="Cumulative Savings ($)",
        xaxis=dict(dtick=1)
    )

    return fig
