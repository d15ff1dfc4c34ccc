# neowatts/calculator.py
# ============================================================
# Calculadora: qué parte del consumo eléctrico es renovable
# ============================================================

import math

import pandas as pd

# Datos del sistema de la calculadora rápida (GW)
INSTALLED_RENEWABLE_GW = 42.3
NATIONAL_DEMAND_GW = 78.0

# (fuente, columna de producción, columna de participación)
CALCULATOR_SOURCES = [
    ("Eólica", "wind_generation", "share_electricity_wind"),
    ("Solar", "solar_energy_consumption", "share_electricity_solar"),
    ("Hidroeléctrica", "hydropower_consumption", "share_electricity_hydro"),
    ("Biocombustibles", "biofuel_production", None),
    ("Geotérmica", "installed_geothermal_capacity", None),
]


def _to_float(value) -> float | None:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def estimate_renewable_potential(consumption_kwh) -> int | None:
    """kWh mensuales que podrían cubrirse con renovables (None si la entrada no es numérica)."""
    consumption = _to_float(consumption_kwh)
    if consumption is None:
        return None
    percentage = INSTALLED_RENEWABLE_GW / NATIONAL_DEMAND_GW * 100
    # medio hacia arriba
    return math.floor(consumption * percentage / 100 + 0.5)


def calculator_options(records: pd.DataFrame) -> tuple[list, list]:
    """Países ordenados y años de más reciente a más antiguo."""
    if records.empty:
        return [], []
    countries = sorted(records["country"].dropna().unique().tolist())
    years = sorted({int(y) for y in records["year"].dropna()}, reverse=True)
    return countries, years


def calculate_renewable_percentage(records: pd.DataFrame, consumption, country: str, year: int) -> dict:
    consumption_value = _to_float(consumption)
    if consumption_value is None or consumption_value <= 0:
        raise ValueError("Ingresa un consumo mensual mayor que 0 kWh.")

    match = records[(records["country"] == country) & (records["year"] == int(year))]
    if match.empty:
        raise LookupError(f"No hay datos para {country} en {year}.")
    row = match.iloc[0]

    renewable_pct = row["share_electricity_renewables"]
    if pd.isna(renewable_pct):
        raise ValueError(
            "Este dataset no permite calcular el porcentaje renovable. "
            "Usa 'Producción Renovable América Latina'."
        )
    renewable_pct = float(renewable_pct)
    renewable_kwh = consumption_value * renewable_pct / 100

    values = {name: float(row[col]) for name, col, _share in CALCULATOR_SOURCES}
    total_production = sum(values.values())

    breakdown = []
    for name, _col, share_col in CALCULATOR_SOURCES:
        share = float(row[share_col]) if share_col else 0.0
        if not share:
            share = values[name] / total_production * renewable_pct if total_production else 0.0
        if share > 0:
            breakdown.append({
                "source": name,
                "percentage": share,
                "consumption": consumption_value * share / 100,
            })

    return {
        "renewable_percentage": renewable_pct,
        "renewable_consumption": renewable_kwh,
        "conventional_consumption": consumption_value - renewable_kwh,
        "total_renewable_production": total_production,
        "breakdown": breakdown,
    }
