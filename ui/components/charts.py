"""
Plotly chart components for comparison results.
"""

import plotly.graph_objects as go

from gridpath.algorithms import get_algorithm_info
from gridpath.benchmark import ComparisonReport
from gridpath.engine import RunResult

FASTEST_COLOR = "#f1c40f"
SUCCESS_COLOR = "#2ecc71"
FAILED_COLOR = "#e74c3c"


def _bar_color(result: RunResult) -> str:
    if result.is_fastest_success:
        return FASTEST_COLOR
    return SUCCESS_COLOR if result.success else FAILED_COLOR


def _label(result: RunResult) -> str:
    try:
        return get_algorithm_info(result.algorithm_id).name
    except ValueError:
        return result.algorithm_id


def create_time_chart(report: ComparisonReport) -> go.Figure:
    """Bar chart of elapsed time, in ranking order."""
    results = list(report)

    fig = go.Figure(data=[
        go.Bar(
            x=[_label(r) for r in results],
            y=[r.elapsed_time_ms for r in results],
            marker_color=[_bar_color(r) for r in results],
            text=[r.status for r in results],
            hovertemplate="<b>%{x}</b><br>%{y:.2f} ms<br>%{text}<extra></extra>",
        )
    ])

    fig.update_layout(
        title="Time (ms)",
        yaxis_title="ms",
        showlegend=False,
        height=280,
        margin=dict(t=35, b=70, l=45, r=15),
    )
    fig.update_xaxes(tickangle=45, tickfont=dict(size=9))
    return fig


def create_visited_chart(report: ComparisonReport) -> go.Figure:
    """Bar chart of visited cells, with path length as hover detail."""
    results = list(report)
    path_labels = [str(r.path_length) if r.success else "N/A" for r in results]

    fig = go.Figure(data=[
        go.Bar(
            x=[_label(r) for r in results],
            y=[r.visited_count for r in results],
            marker_color=[_bar_color(r) for r in results],
            customdata=path_labels,
            hovertemplate="<b>%{x}</b><br>%{y} visited<br>path: %{customdata}<extra></extra>",
        )
    ])

    fig.update_layout(
        title=f"Visited Nodes ({report.cell_count} cells, {report.wall_count} walls)",
        yaxis_title="Cells",
        showlegend=False,
        height=280,
        margin=dict(t=35, b=70, l=45, r=15),
    )
    fig.update_xaxes(tickangle=45, tickfont=dict(size=9))
    return fig
