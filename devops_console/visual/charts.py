"""Chart builders (Altair) for section trends and breakdowns."""

from __future__ import annotations

import altair as alt
import pandas as pd

from devops_console.visual.palette import CATEGORY_PALETTES, DEFAULT_COLOR, color_scale

CHART_HEIGHT = 300


def category_pie(counts: pd.DataFrame, kind: str | None = None, title: str | None = None):
    """Donut chart of ``name, value`` pairs, colored by the palette for ``kind``."""
    if counts is None or counts.empty:
        return None
    data = counts.copy()
    total = float(data["value"].sum())
    data["share"] = data["value"] / total if total else 0.0
    color_kwargs = {"scale": color_scale(kind)} if kind in CATEGORY_PALETTES else {}
    color = alt.Color("name:N", title=None, sort=data["name"].tolist(), **color_kwargs)
    chart = (
        alt.Chart(data)
        .mark_arc(innerRadius=50)
        .encode(
            theta=alt.Theta("value:Q"),
            color=color,
            tooltip=[
                alt.Tooltip("name:N", title="Category"),
                alt.Tooltip("value:Q", title="Count"),
                alt.Tooltip("share:Q", title="Share", format=".0%"),
            ],
        )
        .properties(height=CHART_HEIGHT)
    )
    if title:
        chart = chart.properties(title=title)
    return chart


def category_bar(counts: pd.DataFrame, title: str | None = None, color: str = DEFAULT_COLOR):
    if counts is None or counts.empty:
        return None
    chart = (
        alt.Chart(counts)
        .mark_bar(color=color)
        .encode(
            x=alt.X("name:N", sort=counts["name"].tolist(), title=None),
            y=alt.Y("value:Q", title="Count"),
            tooltip=[alt.Tooltip("name:N", title="Category"), alt.Tooltip("value:Q", title="Count")],
        )
        .properties(height=CHART_HEIGHT)
    )
    if title:
        chart = chart.properties(title=title)
    return chart


def incident_trend_chart(trend: pd.DataFrame):
    if trend is None or trend.empty:
        return None
    data = trend.copy()
    data["date"] = pd.to_datetime(data["date"])
    long = data.melt(id_vars="date", value_vars=["open", "resolved"], var_name="series", value_name="count")
    long["series"] = long["series"].map({"open": "New Incidents", "resolved": "Resolved Incidents"})
    return (
        alt.Chart(long)
        .mark_line(point=True, strokeWidth=2)
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("count:Q", title="Incidents"),
            color=alt.Color(
                "series:N",
                title=None,
                scale=alt.Scale(
                    domain=["New Incidents", "Resolved Incidents"],
                    range=["#ff7300", "#82ca9d"],
                ),
            ),
            tooltip=[
                alt.Tooltip("date:T", title="Date"),
                alt.Tooltip("series:N", title="Series"),
                alt.Tooltip("count:Q", title="Count"),
            ],
        )
        .properties(height=CHART_HEIGHT)
    )


def metric_series_chart(series: pd.DataFrame, y_title: str, color: str = DEFAULT_COLOR, area: bool = False):
    """Line (or area) chart of a ``time, value`` monitoring series."""
    if series is None or series.empty:
        return None
    mark = (
        alt.Chart(series).mark_area(color=color, opacity=0.5, line={"color": color})
        if area
        else alt.Chart(series).mark_line(color=color)
    )
    return mark.encode(
        x=alt.X("time:T", title="Time", axis=alt.Axis(format="%H:%M")),
        y=alt.Y("value:Q", title=y_title),
        tooltip=[alt.Tooltip("time:T", title="Time", format="%H:%M"), alt.Tooltip("value:Q", title=y_title)],
    ).properties(height=250)


def build_duration_chart(builds: pd.DataFrame):
    if builds is None or builds.empty:
        return None
    data = builds.copy()
    data["result"] = data["success"].map({True: "Success", False: "Failed"})
    line = (
        alt.Chart(data)
        .mark_line(color="#8884d8")
        .encode(
            x=alt.X("name:N", sort=data["name"].tolist(), title="Build", axis=alt.Axis(labels=False)),
            y=alt.Y("duration:Q", title="Duration (min)", scale=alt.Scale(zero=False)),
        )
    )
    failures = (
        alt.Chart(data[~data["success"].astype(bool)])
        .mark_point(color="#ef4444", filled=True, size=60)
        .encode(
            x=alt.X("name:N", sort=data["name"].tolist()),
            y="duration:Q",
            tooltip=[
                alt.Tooltip("name:N", title="Build"),
                alt.Tooltip("duration:Q", title="Minutes"),
                alt.Tooltip("result:N", title="Result"),
            ],
        )
    )
    return (line + failures).properties(height=CHART_HEIGHT)


def deployment_frequency_chart(frequency: pd.DataFrame):
    if frequency is None or frequency.empty:
        return None
    return (
        alt.Chart(frequency)
        .mark_bar(color="#82ca9d", cornerRadiusTopLeft=4, cornerRadiusTopRight=4)
        .encode(
            x=alt.X("month:N", sort=frequency["month"].tolist(), title="Month"),
            y=alt.Y("deployments:Q", title="Deployments"),
            tooltip=["month", "deployments"],
        )
        .properties(height=CHART_HEIGHT)
    )


def cost_trend_chart(trend: pd.DataFrame, months: list[str]):
    """Stacked area of monthly spend per component."""
    if trend is None or trend.empty:
        return None
    return (
        alt.Chart(trend)
        .mark_area()
        .encode(
            x=alt.X("month:N", sort=months, title="Month"),
            y=alt.Y("value:Q", stack="zero", title="Spend ($)"),
            color=alt.Color("component:N", title=None, scale=color_scale("cost_component")),
            tooltip=[
                alt.Tooltip("month:N", title="Month"),
                alt.Tooltip("component:N", title="Component"),
                alt.Tooltip("value:Q", title="Spend", format="$,.2f"),
            ],
        )
        .properties(height=CHART_HEIGHT)
    )


def pr_activity_chart(activity: pd.DataFrame):
    if activity is None or activity.empty:
        return None
    data = activity.copy()
    data["date"] = pd.to_datetime(data["date"])
    data["series"] = data["series"].map({"open": "Open PRs", "merged": "Merged PRs"})
    return (
        alt.Chart(data)
        .mark_bar()
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("value:Q", title="Pull Requests"),
            color=alt.Color(
                "series:N",
                title=None,
                scale=alt.Scale(domain=["Open PRs", "Merged PRs"], range=["#8884d8", "#82ca9d"]),
            ),
            xOffset="series:N",
            tooltip=[
                alt.Tooltip("date:T", title="Date"),
                alt.Tooltip("series:N", title="Series"),
                alt.Tooltip("value:Q", title="Count"),
            ],
        )
        .properties(height=CHART_HEIGHT)
    )


def code_quality_chart(quality: pd.DataFrame):
    if quality is None or quality.empty:
        return None
    order = quality.sort_values("coverage", ascending=False)["service"].tolist()
    return (
        alt.Chart(quality)
        .mark_bar(color="#a78bfa")
        .encode(
            y=alt.Y("service:N", sort=order, title=None),
            x=alt.X("coverage:Q", title="Coverage (%)", scale=alt.Scale(domain=[0, 100])),
            tooltip=[
                alt.Tooltip("service:N", title="Service"),
                alt.Tooltip("coverage:Q", title="Coverage", format=".1f"),
                alt.Tooltip("bugs_found:Q", title="Bugs"),
                alt.Tooltip("technical_debt_hours:Q", title="Debt (h)"),
            ],
        )
        .properties(height=alt.Step(18))
    )
