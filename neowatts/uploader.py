# neowatts/uploader.py
# ============================================================
# Datos propios (CSV / JSON) y datos de ejemplo
# ============================================================

from io import StringIO
import json
import logging

import numpy as np
import pandas as pd

from neowatts.datasets import NUMERIC_COLUMNS, RENEWABLE_COLUMNS, numeric_column

logger = logging.getLogger(__name__)

UPLOAD_ERROR = "Error al procesar el archivo. Verifica el formato."

SAMPLE_COUNTRIES = ["España", "Alemania", "Estados Unidos", "China", "Brasil"]
SAMPLE_YEARS = range(2018, 2023)
# columna -> (mínimo, amplitud) de la distribución uniforme
SAMPLE_RANGES = {
    "wind_generation": (50, 100),
    "solar_energy_consumption": (30, 80),
    "hydropower_consumption": (60, 120),
    "biofuel_production": (10, 40),
    "installed_geothermal_capacity": (5, 20),
    "share_electricity_renewables": (20, 60),
    "share_electricity_wind": (5, 25),
    "share_electricity_solar": (3, 15),
    "share_electricity_hydro": (10, 30),
    "cumulative_installed_wind_energy_capacity_gigawatts": (100, 200),
    "installed_solar_pv_capacity": (75, 150),
    "modern_renewable_energy_consumption": (150, 300),
    "conventional_energy_consumption": (250, 500),
}


def normalize_column(name) -> str:
    """'installed-solar-PV-capacity' -> 'installed_solar_pv_capacity'."""
    return str(name).strip().strip('"').lower().replace("-", "_").replace(" ", "_")


def records_from_frame(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame(columns=RENEWABLE_COLUMNS)
    df = df.rename(columns=normalize_column)
    if "year" not in df.columns:
        raise ValueError(UPLOAD_ERROR)
    year = pd.to_numeric(df["year"], errors="coerce")
    keep = year.notna() & (year != 0)
    df = df.loc[keep].copy()
    out = pd.DataFrame({"year": year[keep].astype("int64")}, index=df.index)
    if "country" in df.columns:
        out["country"] = df["country"].where(df["country"].notna(), "").astype(str).str.strip()
    else:
        out["country"] = ""
    for col in NUMERIC_COLUMNS:
        out[col] = numeric_column(df, col)
    # Participación renovable ausente = no calculable
    if "share_electricity_renewables" in df.columns:
        out["share_electricity_renewables"] = pd.to_numeric(df["share_electricity_renewables"], errors="coerce")
    else:
        out["share_electricity_renewables"] = np.nan
    return out[RENEWABLE_COLUMNS].reset_index(drop=True)


def parse_uploaded_file(name: str, content) -> pd.DataFrame:
    """Archivo subido (CSV o JSON) -> registros en el esquema común."""
    try:
        text = content.decode("utf-8-sig") if isinstance(content, bytes) else str(content)
        if name.lower().endswith(".json"):
            payload = json.loads(text)
            if not isinstance(payload, list):
                raise ValueError("Se esperaba una lista de registros")
            df = pd.DataFrame(payload)
        else:
            df = pd.read_csv(StringIO(text), skipinitialspace=True)
    except (ValueError, UnicodeDecodeError, pd.errors.ParserError) as exc:
        logger.warning("Archivo %s inválido: %s", name, exc)
        raise ValueError(UPLOAD_ERROR) from exc
    records = records_from_frame(df)
    logger.info("Datos cargados desde %s: %d registros", name, len(records))
    return records


def generate_sample_data(seed: int | None = None) -> pd.DataFrame:
    """Datos aleatorios de demostración: 5 países x 2018-2022."""
    rng = np.random.default_rng(seed)
    rows = []
    for year in SAMPLE_YEARS:
        for country in SAMPLE_COUNTRIES:
            row = {"year": year, "country": country}
            for col, (low, span) in SAMPLE_RANGES.items():
                row[col] = float(rng.random() * span + low)
            rows.append(row)
    return pd.DataFrame(rows, columns=RENEWABLE_COLUMNS)
