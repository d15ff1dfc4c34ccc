# neowatts/aggregations.py
# Agregaciones del dashboard sobre registros en el esquema común.

import pandas as pd

BAR_COLUMNS = {
    "wind_generation": "Eólica",
    "solar_energy_consumption": "Solar",
    "hydropower_consumption": "Hidroeléctrica",
    "biofuel_production": "Biocombustibles",
    "installed_geothermal_capacity": "Geotérmica",
}

LINE_COLUMNS = {
    "cumulative_installed_wind_energy_capacity_gigawatts": "Capacidad Eólica (GW)",
    "installed_solar_pv_capacity": "Capacidad Solar (GW)",
    "installed_geothermal_capacity": "Capacidad Geotérmica (GW)",
}

AREA_COLUMNS = {
    "modern_renewable_energy_consumption": "Energía Renovable",
    "conventional_energy_consumption": "Energía Convencional",
}

PIE_COLORS = {
    "Eólica": "#3B82F6",
    "Solar": "#F59E0B",
    "Hidroeléctrica": "#10B981",
    "Otras Renovables": "#8B5CF6",
}


def yearly_means(records: pd.DataFrame, columns: dict, decimals: int = 1) -> pd.DataFrame:
    """Promedio por año de las columnas indicadas, renombradas a sus etiquetas."""
    if records.empty:
        return pd.DataFrame(columns=["year"] + list(columns.values()))
    out = (
        records.groupby("year")[list(columns)]
        .mean()
        .round(decimals)
        .rename(columns=columns)
        .sort_index()
        .reset_index()
    )
    return out


def bar_chart_data(records: pd.DataFrame) -> pd.DataFrame:
    return yearly_means(records, BAR_COLUMNS)


def line_chart_data(records: pd.DataFrame) -> pd.DataFrame:
    return yearly_means(records, LINE_COLUMNS)


def area_chart_data(records: pd.DataFrame) -> pd.DataFrame:
    return yearly_means(records, AREA_COLUMNS)


def pie_chart_data(records: pd.DataFrame) -> pd.DataFrame:
    """Participación promedio por fuente en el último año disponible."""
    empty = pd.DataFrame(columns=["name", "value", "color"])
    if records.empty:
        return empty
    latest = records[records["year"] == records["year"].max()]
    shares = latest[[
        "share_electricity_renewables", "share_electricity_wind",
        "share_electricity_solar", "share_electricity_hydro",
    ]].fillna(0.0)
    other = (
        shares["share_electricity_renewables"]
        - shares["share_electricity_wind"]
        - shares["share_electricity_solar"]
        - shares["share_electricity_hydro"]
    ).clip(lower=0)
    values = {
        "Eólica": shares["share_electricity_wind"].mean(),
        "Solar": shares["share_electricity_solar"].mean(),
        "Hidroeléctrica": shares["share_electricity_hydro"].mean(),
        "Otras Renovables": other.mean(),
    }
    out = pd.DataFrame([
        {"name": name, "value": round(float(value), 1), "color": PIE_COLORS[name]}
        for name, value in values.items()
    ])
    out = out[out["value"] > 0].reset_index(drop=True)
    return out if not out.empty else empty


def summary_stats(records: pd.DataFrame) -> dict:
    if records.empty:
        return {"records": 0, "countries": 0, "years_covered": 0,
                "year_min": None, "year_max": None, "avg_renewable_share": None}
    year_min = int(records["year"].min())
    year_max = int(records["year"].max())
    share = records["share_electricity_renewables"].dropna()
    return {
        "records": int(len(records)),
        "countries": int(records["country"].nunique()),
        "years_covered": year_max - year_min + 1,
        "year_min": year_min,
        "year_max": year_max,
        "avg_renewable_share": None if share.empty else round(float(share.mean()), 1),
    }
