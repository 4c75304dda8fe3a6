"""
Chart functions for investment series and portfolios.

All chart functions return (figure, tidy_dataframe_used) for consistency, so the
same data can be rendered elsewhere or asserted on in tests.
"""

from __future__ import annotations

import pandas as pd

from depositlab.core.results import ProjectionPoint, SeriesPoint
from depositlab.engine import series_frame

# Plotly imports with graceful fallback
try:
    import plotly.express as px
    import plotly.graph_objects as go

    PLOTLY_AVAILABLE = True
except ImportError:
    PLOTLY_AVAILABLE = False


def _check_plotly() -> None:
    """Check if Plotly is available and raise helpful error if not."""
    if not PLOTLY_AVAILABLE:
        raise ImportError(
            "Plotly is required for chart functions. Install with:\n"
            "pip install plotly\n"
            "or\n"
            "pip install 'depositlab[viz]'"
        )


def growth_chart(
    points: list[SeriesPoint], title: str = "Growth"
) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot invested vs. value for a historical series.

    Confirmed points are drawn solid; trailing projected points are drawn dashed
    and joined to the last confirmed point so the line is continuous.

    **Args:**
        points: Output of ``engine.history``
        title: Figure title

    **Returns:**
        Tuple of (plotly_figure, tidy_dataframe_used)

    **Example:**
        ```python
        from depositlab import engine
        from depositlab.charts import growth_chart

        fig, df = growth_chart(engine.history(inv, now), title="My FD")
        fig.show()
        ```
    """
    _check_plotly()

    df = series_frame(points)
    fig = go.Figure()
    if df.empty:
        fig.update_layout(title=title)
        return fig, df

    x = list(range(len(df)))
    confirmed = df[~df["projected"]]
    projected = df[df["projected"]]

    fig.add_trace(
        go.Scatter(
            x=x,
            y=df["invested"],
            name="Invested",
            mode="lines",
            line={"color": "#94A3B8"},
        )
    )
    fig.add_trace(
        go.Scatter(
            x=[x[i] for i in confirmed.index],
            y=confirmed["value"],
            name="Value",
            mode="lines+markers",
            line={"color": "#16A34A"},
        )
    )
    if not projected.empty:
        bridge = [projected.index[0] - 1] if projected.index[0] > 0 else []
        idx = bridge + list(projected.index)
        fig.add_trace(
            go.Scatter(
                x=[x[i] for i in idx],
                y=df.loc[idx, "value"],
                name="Projected",
                mode="lines",
                line={"color": "#16A34A", "dash": "dash"},
            )
        )

    fig.update_layout(
        title=title,
        hovermode="x unified",
        xaxis={"tickmode": "array", "tickvals": x, "ticktext": list(df["label"])},
        yaxis_title="Amount",
    )
    return fig, df


def projection_chart(
    points: list[ProjectionPoint], title: str = "Projection"
) -> tuple[go.Figure, pd.DataFrame]:
    """
    Plot a tenure-preview projection (value by month).

    **Returns:**
        Tuple of (plotly_figure, tidy_dataframe_used)
    """
    _check_plotly()

    df = pd.DataFrame([p._asdict() for p in points], columns=list(ProjectionPoint._fields))
    fig = px.line(
        df,
        x="month",
        y="value",
        title=title,
        labels={"month": "Month", "value": "Projected Value"},
    )
    fig.update_layout(hovermode="x unified")
    return fig, df


def allocation_by_type(frame: pd.DataFrame) -> tuple[go.Figure, pd.DataFrame]:
    """
    Donut of current value per product type.

    **Args:**
        frame: Output of ``portfolio.portfolio_frame``

    **Returns:**
        Tuple of (plotly_figure, aggregated_dataframe_used)
    """
    _check_plotly()

    agg = frame.groupby("type", as_index=False)["current_value"].sum()
    fig = px.pie(
        agg,
        names="type",
        values="current_value",
        hole=0.5,
        title="Portfolio Allocation",
    )
    return fig, agg


def save_chart(fig: go.Figure, filename: str, format: str = "html") -> None:
    """
    Save a chart to file.

    Args:
        fig: Plotly figure
        filename: Output filename
        format: 'html' or an image format supported by kaleido ('png', 'svg')
    """
    _check_plotly()

    if format == "html":
        fig.write_html(filename)
    else:
        fig.write_image(filename, format=format)
