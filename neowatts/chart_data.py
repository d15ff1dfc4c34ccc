# neowatts/chart_data.py
# ============================================================
# Archivos específicos por gráfico (barras, torta, líneas)
# y su agregación por año
# ============================================================

import logging

import pandas as pd

from neowatts.config import resolve_data_location
from neowatts.datasets import get_dataset, numeric_column, read_csv_location

logger = logging.getLogger(__name__)

CHART_DATA_FILES = {
    "bar-chart-renewable-consumption": {
        "name": "Consumo Moderno de Energía Renovable LATAM",
        "description": "Producción de energía renovable por fuente (Biomasa, Solar, Eólica, Hidráulica)",
        "chart_type": "bar",
        "type": "CSV",
        "size": "2.1 MB",
        "records": 7800,
        "filename": "modern_renewable_energy_consumption_latam.csv",
        "schema": [
            "Entity", "Code", "Year",
            "Geo Biomass Other - TWh",
            "Solar Generation - TWh",
            "Wind Generation - TWh",
            "Hydro Generation - TWh",
        ],
    },
    "pie-chart-hydropower": {
        "name": "Consumo Hidroeléctrico LATAM",
        "description": "Electricidad generada por fuente hidroeléctrica",
        "chart_type": "pie",
        "type": "CSV",
        "size": "1.5 MB",
        "records": 6500,
        "filename": "hydropower_consumption_latam.csv",
        "schema": ["Entity", "Code", "Year", "Electricity from hydro (TWh)"],
    },
    "pie-chart-wind": {
        "name": "Generación Eólica LATAM",
        "description": "Electricidad generada por fuente eólica",
        "chart_type": "pie",
        "type": "CSV",
        "size": "1.2 MB",
        "records": 5800,
        "filename": "wind_generation_latam.csv",
        "schema": ["Entity", "Code", "Year", "Electricity from wind (TWh)"],
    },
    "pie-chart-biofuel": {
        "name": "Producción de Biocombustibles LATAM",
        "description": "Producción total de biocombustibles",
        "chart_type": "pie",
        "type": "CSV",
        "size": "0.8 MB",
        "records": 4200,
        "filename": "biofuel_production_latam.csv",
        "schema": ["Entity", "Code", "Year", "Biofuels Production - TWh - Total"],
    },
    "pie-chart-solar": {
        "name": "Consumo Solar LATAM",
        "description": "Electricidad generada por fuente solar",
        "chart_type": "pie",
        "type": "CSV",
        "size": "1.1 MB",
        "records": 5200,
        "filename": "solar_energy_consumption_latam.csv",
        "schema": ["Entity", "Code", "Year", "Electricity from solar (TWh)"],
    },
    "pie-chart-geothermal": {
        "name": "Capacidad Geotérmica LATAM",
        "description": "Capacidad instalada geotérmica",
        "chart_type": "pie",
        "type": "CSV",
        "size": "0.6 MB",
        "records": 3100,
        "filename": "installed_geothermal_capacity_latam.csv",
        "schema": ["Entity", "Code", "Year", "Geothermal Capacity"],
    },
    "line-chart-wind-capacity": {
        "name": "Capacidad Eólica Acumulada LATAM",
        "description": "Capacidad instalada acumulada de energía eólica en gigawatts",
        "chart_type": "line",
        "type": "CSV",
        "size": "1.8 MB",
        "records": 6200,
        "filename": "cumulative_installed_wind_energy_capacity_gigawatts_latam.csv",
        "schema": ["Entity", "Code", "Year", "Wind Capacity"],
    },
    "line-chart-solar-capacity": {
        "name": "Capacidad Solar PV LATAM",
        "description": "Capacidad instalada de paneles solares fotovoltaicos",
        "chart_type": "line",
        "type": "CSV",
        "size": "1.4 MB",
        "records": 5400,
        "filename": "installed_solar_PV_capacity_latam.csv",
        "schema": ["Entity", "Code", "Year", "Solar Capacity"],
    },
    "line-chart-geothermal-capacity": {
        "name": "Capacidad Geotérmica LATAM v2",
        "description": "Capacidad instalada geotérmica actualizada",
        "chart_type": "line",
        "type": "CSV",
        "size": "0.9 MB",
        "records": 3800,
        "filename": "installed_geothermal_capacity_2_latam.csv",
        "schema": ["Entity", "Code", "Year", "Geothermal Capacity"],
    },
}

BAR_SOURCES = {
    "Geo Biomass Other - TWh": "Biomasa y Otros",
    "Solar Generation - TWh": "Solar",
    "Wind Generation - TWh": "Eólica",
    "Hydro Generation - TWh": "Hidroeléctrica",
}

# (etiqueta, archivo, columna, color)
PIE_SOURCES = [
    ("Hidroeléctrica", "pie-chart-hydropower", "Electricity from hydro (TWh)", "#06B6D4"),
    ("Eólica", "pie-chart-wind", "Electricity from wind (TWh)", "#3B82F6"),
    ("Solar", "pie-chart-solar", "Electricity from solar (TWh)", "#F59E0B"),
    ("Biocombustibles", "pie-chart-biofuel", "Biofuels Production - TWh - Total", "#10B981"),
    ("Geotérmica", "pie-chart-geothermal", "Geothermal Capacity", "#EF4444"),
]
# MW instalados -> TWh/año aproximados
GEOTHERMAL_MW_TO_TWH = 0.0076
PIE_ABSOLUTE_THRESHOLD = 1

# (etiqueta, archivo, columna, divisor a GW)
LINE_SOURCES = [
    ("Capacidad Eólica (GW)", "line-chart-wind-capacity", "Wind Capacity", 1e9),  # W
    ("Capacidad Solar (GW)", "line-chart-solar-capacity", "Solar Capacity", 1e3),  # MW
    ("Capacidad Geotérmica (GW)", "line-chart-geothermal-capacity", "Geothermal Capacity", 1e3),  # MW
]


def _years(df: pd.DataFrame) -> pd.Series:
    if "Year" not in df.columns:
        return pd.Series(dtype="int64")
    return pd.to_numeric(df["Year"], errors="coerce").dropna().astype("int64")


# ---------------------------#
# Agregaciones
# ---------------------------#
def process_bar_chart_data(rows: pd.DataFrame) -> pd.DataFrame:
    """Promedio anual por fuente (todos los años, no solo los últimos)."""
    labels = list(BAR_SOURCES.values())
    if rows.empty or "Year" not in rows.columns:
        return pd.DataFrame(columns=["year"] + labels)
    work = pd.DataFrame({"year": rows["Year"].astype("int64")})
    for col, label in BAR_SOURCES.items():
        work[label] = numeric_column(rows, col)
    out = work.groupby("year", as_index=False).mean().round(2)
    return out.sort_values("year").reset_index(drop=True)


def process_pie_chart_data(
    hydro: pd.DataFrame,
    wind: pd.DataFrame,
    biofuel: pd.DataFrame,
    solar: pd.DataFrame,
    geothermal: pd.DataFrame,
) -> dict:
    frames = {
        "pie-chart-hydropower": hydro,
        "pie-chart-wind": wind,
        "pie-chart-biofuel": biofuel,
        "pie-chart-solar": solar,
        "pie-chart-geothermal": geothermal,
    }
    all_years = pd.concat([_years(df) for df in frames.values()], ignore_index=True)
    if all_years.empty:
        logger.warning("Gráfico de torta sin años disponibles")
        return {
            "data": pd.DataFrame(columns=["name", "value", "absolute", "color"]),
            "year": None,
            "total": 0.0,
            "use_absolute_values": True,
        }
    latest_year = int(all_years.max())

    totals = {}
    for name, file_id, col, _color in PIE_SOURCES:
        df = frames[file_id]
        latest = df[df["Year"] == latest_year] if "Year" in df.columns else df.iloc[0:0]
        totals[name] = float(numeric_column(latest, col).sum())
    totals["Geotérmica"] *= GEOTHERMAL_MW_TO_TWH
    logger.info("Totales torta %d: %s", latest_year, totals)

    total = sum(totals.values())
    # Si el total es muy pequeño se muestran valores absolutos
    use_absolute = total < PIE_ABSOLUTE_THRESHOLD

    rows = []
    for name, _file_id, _col, color in PIE_SOURCES:
        value = totals[name]
        rows.append({
            "name": name,
            "value": value if use_absolute else round(value / total * 100, 1),
            "absolute": round(value, 2),
            "color": color,
        })
    return {
        "data": pd.DataFrame(rows),
        "year": latest_year,
        "total": round(total, 2),
        "use_absolute_values": use_absolute,
    }


def process_line_chart_data(
    wind_capacity: pd.DataFrame,
    solar_capacity: pd.DataFrame,
    geothermal_capacity: pd.DataFrame,
) -> pd.DataFrame:
    frames = {
        "line-chart-wind-capacity": wind_capacity,
        "line-chart-solar-capacity": solar_capacity,
        "line-chart-geothermal-capacity": geothermal_capacity,
    }
    years = sorted(set().union(*[set(_years(df)) for df in frames.values()]))
    out = pd.DataFrame({"year": pd.Series(years, dtype="int64")})
    for label, file_id, col, divisor in LINE_SOURCES:
        df = frames[file_id]
        if df.empty or "Year" not in df.columns:
            out[label] = 0.0
            continue
        yearly = (numeric_column(df, col) / divisor).groupby(df["Year"]).sum()
        out[label] = out["year"].map(yearly).fillna(0.0).round(2)
    return out


# ---------------------------#
# Carga
# ---------------------------#
def load_single_chart_file(file_id: str, base: str | None = None) -> pd.DataFrame:
    chart_file = get_dataset(file_id, CHART_DATA_FILES)
    logger.info("Cargando archivo: %s", chart_file["name"])
    return read_csv_location(resolve_data_location(chart_file["filename"], base))


def load_chart_data(file_id: str, base: str | None = None) -> pd.DataFrame:
    rows = load_single_chart_file(file_id, base)
    if file_id == "bar-chart-renewable-consumption":
        return process_bar_chart_data(rows)
    return rows


def load_pie_chart_data(base: str | None = None) -> dict:
    frames = {file_id: load_single_chart_file(file_id, base) for _name, file_id, _col, _color in PIE_SOURCES}
    return process_pie_chart_data(
        frames["pie-chart-hydropower"],
        frames["pie-chart-wind"],
        frames["pie-chart-biofuel"],
        frames["pie-chart-solar"],
        frames["pie-chart-geothermal"],
    )


def load_line_chart_data(base: str | None = None) -> pd.DataFrame:
    frames = {file_id: load_single_chart_file(file_id, base) for _label, file_id, _col, _div in LINE_SOURCES}
    return process_line_chart_data(
        frames["line-chart-wind-capacity"],
        frames["line-chart-solar-capacity"],
        frames["line-chart-geothermal-capacity"],
    )
