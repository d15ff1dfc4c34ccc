# neowatts/charts.py
# ============================================================
# Figuras Plotly para el dashboard + tema visual
# ============================================================

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go
import plotly.io as pio

TEMPLATE_NAME = "neowatts"

SOURCE_COLORS = {
    "Eólica": "#3B82F6",
    "Solar": "#F59E0B",
    "Hidroeléctrica": "#10B981",
    "Biocombustibles": "#EF4444",
    "Geotérmica": "#8B5CF6",
    "Biomasa y Otros": "#F97316",
    "Otras Renovables": "#8B5CF6",
    "Capacidad Eólica (GW)": "#3B82F6",
    "Capacidad Solar (GW)": "#F59E0B",
    "Capacidad Geotérmica (GW)": "#8B5CF6",
    "Energía Renovable": "#10B981",
    "Energía Convencional": "#EF4444",
}


def set_plotly_theme():
    pio.templates[TEMPLATE_NAME] = pio.templates["plotly_white"]
    t = pio.templates[TEMPLATE_NAME].layout
    t.font.family = "Inter, sans-serif"
    t.font.color = "#1f2937"
    # Paleta verde/azul de la marca
    t.colorway = ["#10B981", "#3B82F6", "#F59E0B", "#EF4444", "#8B5CF6", "#F97316"]
    px.defaults.template = TEMPLATE_NAME
    px.defaults.height = 420


def _long(df: pd.DataFrame, var_name: str, value_name: str) -> pd.DataFrame:
    return df.melt("year", var_name=var_name, value_name=value_name)


def bar_figure(df: pd.DataFrame, title: str = "Producción de Energía por Fuente") -> go.Figure:
    plot = _long(df, "fuente", "TWh")
    fig = px.bar(
        plot, x="year", y="TWh", color="fuente", barmode="group",
        color_discrete_map=SOURCE_COLORS, title=title,
        labels={"year": "Año", "fuente": "Fuente"},
    )
    fig.update_traces(hovertemplate="Año %{x}<br>%{y} TWh<extra>%{fullData.name}</extra>")
    fig.update_layout(margin=dict(l=10, r=10, t=60, b=20), legend_title_text="Fuente")
    return fig


def pie_figure(df: pd.DataFrame, title: str = "Participación de Energías Renovables", suffix: str = "%") -> go.Figure:
    fig = px.pie(
        df, names="name", values="value", color="name",
        color_discrete_map=dict(zip(df["name"], df["color"])), title=title,
    )
    fig.update_traces(
        texttemplate="%{label}: %{value}" + suffix,
        hovertemplate="%{label}<br>%{value}" + suffix + "<extra></extra>",
    )
    fig.update_layout(margin=dict(l=10, r=10, t=60, b=20), showlegend=True)
    return fig


def line_figure(df: pd.DataFrame, title: str = "Tendencia de Capacidad Instalada") -> go.Figure:
    plot = _long(df, "fuente", "GW")
    fig = px.line(
        plot, x="year", y="GW", color="fuente", markers=True,
        color_discrete_map=SOURCE_COLORS, title=title,
        labels={"year": "Año", "fuente": "Fuente"},
    )
    fig.update_traces(line=dict(width=3))
    fig.update_layout(margin=dict(l=10, r=10, t=60, b=20), legend_title_text="Fuente")
    return fig


def area_figure(df: pd.DataFrame, title: str = "Comparación Energía Renovable vs Convencional") -> go.Figure:
    plot = _long(df, "tipo", "TWh")
    fig = px.area(
        plot, x="year", y="TWh", color="tipo",
        color_discrete_map=SOURCE_COLORS, title=title,
        labels={"year": "Año", "tipo": "Tipo"},
    )
    fig.update_traces(line=dict(width=2))
    fig.update_layout(margin=dict(l=10, r=10, t=60, b=20), legend_title_text="Tipo")
    return fig
