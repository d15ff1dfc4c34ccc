# neowatts/datasets.py
# ============================================================
# Datasets predefinidos (CSV) -> registros de energía renovable
# - Lectura robusta de CSV (URL o carpeta local)
# - Conversión por archivo a un esquema común por (país, año)
# - Solo "latam-renewable-production" permite calcular porcentajes
# ============================================================

from io import StringIO
import logging

import numpy as np
import pandas as pd

from neowatts.config import resolve_data_location

logger = logging.getLogger(__name__)


class DatasetNotFoundError(KeyError):
    """Identificador de dataset desconocido."""


class DatasetLoadError(RuntimeError):
    """Fallo al leer o interpretar un CSV."""


# ---------------------------#
# Esquema común
# ---------------------------#
RENEWABLE_COLUMNS = [
    "year", "country",
    "wind_generation", "solar_energy_consumption", "hydropower_consumption",
    "biofuel_production", "installed_geothermal_capacity",
    "share_electricity_renewables", "share_electricity_wind",
    "share_electricity_solar", "share_electricity_hydro",
    "cumulative_installed_wind_energy_capacity_gigawatts",
    "installed_solar_pv_capacity",
    "modern_renewable_energy_consumption", "conventional_energy_consumption",
]
NUMERIC_COLUMNS = RENEWABLE_COLUMNS[2:]
RAW_KEY_COLUMNS = ["Entity", "Code", "Year"]
# attrs del DataFrame leído: filas recortadas al ancho de la cabecera
TRUNCATED_ROWS = "truncated_rows"

# ---------------------------#
# Catálogo de archivos
# ---------------------------#
# Ojo: las columnas "% equivalent primary energy" en realidad vienen en TWh.
PREDEFINED_FILES = {
    "solar-share-latam": {
        "name": "Producción Solar en América Latina",
        "description": "Producción de energía solar en TWh (no porcentaje) - Datos de generación solar por país",
        "type": "CSV",
        "size": "1.2 MB",
        "records": 8500,
        "filename": "solar_share_energy_latam.csv",
        "schema": ["Entity", "Code", "Year", "Solar (% equivalent primary energy)"],
    },
    "latam-renewable-production": {
        "name": "Producción Renovable América Latina",
        "description": "Único con porcentajes reales - Participación de energías renovables en el mix energético",
        "type": "CSV",
        "size": "2.8 MB",
        "records": 8200,
        "filename": "latam_modern_renewable_prod.csv",
        "schema": [
            "Entity", "Code", "Year",
            "Electricity from wind (TWh)",
            "Electricity from hydro (TWh)",
            "Electricity from solar (TWh)",
            "Other renewables including bioenergy (TWh)",
        ],
    },
    "wind-share-latam": {
        "name": "Producción Eólica en América Latina",
        "description": "Producción de energía eólica en TWh (no porcentaje) - Datos de generación eólica por país",
        "type": "CSV",
        "size": "1.0 MB",
        "records": 5800,
        "filename": "wind_share_energy_latam.csv",
        "schema": ["Entity", "Code", "Year", "Wind (% equivalent primary energy)"],
    },
    "hydro-share-latam": {
        "name": "Producción Hidroeléctrica en América Latina",
        "description": "Producción de energía hidroeléctrica en TWh (no porcentaje) - Datos de generación hidro por país",
        "type": "CSV",
        "size": "1.5 MB",
        "records": 6500,
        "filename": "hydro_share_energy_latam.csv",
        "schema": ["Entity", "Code", "Year", "Hydro (% equivalent primary energy)"],
    },
    "renewable-share-latam": {
        "name": "Producción Total Renovable en América Latina",
        "description": "Producción total de energía renovable en TWh (no porcentaje) - Suma de todas las fuentes renovables",
        "type": "CSV",
        "size": "1.8 MB",
        "records": 7200,
        "filename": "renewable_share_energy_latam.csv",
        "schema": ["Entity", "Code", "Year", "Renewables (% equivalent primary energy)"],
    },
}

# Distribución típica en LATAM para repartir el total renovable
RENEWABLE_SPLIT = {
    "hydropower_consumption": 0.65,
    "wind_generation": 0.20,
    "solar_energy_consumption": 0.10,
    "biofuel_production": 0.05,
}

# Topes de participación (%) para el dataset LATAM
SHARE_CAPS = {
    "share_electricity_renewables": 95,
    "share_electricity_wind": 50,
    "share_electricity_solar": 30,
    "share_electricity_hydro": 90,
}

WIND_CAPACITY_FACTOR = 0.3
SOLAR_CAPACITY_FACTOR = 0.2

# Consumo eléctrico total aproximado por país (TWh/año, años recientes)
COUNTRY_CONSUMPTION_TWH = {
    "Brazil": 500,
    "Mexico": 280,
    "Argentina": 140,
    "Chile": 75,
    "Colombia": 70,
    "Venezuela": 85,
    "Peru": 50,
    "Ecuador": 25,
    "Uruguay": 12,
    "Bolivia": 8,
    "Paraguay": 15,
    "Costa Rica": 11,
    "Panama": 10,
    "Guatemala": 10,
    "Honduras": 8,
    "Nicaragua": 4,
    "El Salvador": 6,
    "Dominican Republic": 18,
    "Cuba": 17,
    "Jamaica": 3,
}
DEFAULT_CONSUMPTION_TWH = 20

# (año mínimo, factor) de mayor a menor
YEAR_FACTORS = [
    (2020, 1.0),
    (2015, 0.9),
    (2010, 0.8),
    (2005, 0.7),
    (2000, 0.6),
    (1995, 0.5),
    (1990, 0.4),
]
OLDEST_YEAR_FACTOR = 0.3
RENEWABLE_HEADROOM = 1.2


def get_dataset(file_id: str, catalog: dict | None = None) -> dict:
    catalog = PREDEFINED_FILES if catalog is None else catalog
    try:
        return catalog[file_id]
    except KeyError:
        raise DatasetNotFoundError(f"Archivo no encontrado: {file_id}") from None


# ---------------------------#
# Lectura de CSV
# ---------------------------#
def clean_raw_rows(df: pd.DataFrame) -> pd.DataFrame:
    """Normaliza cabeceras y descarta filas sin Entity o Year."""
    df = df.rename(columns=lambda c: str(c).strip().replace('"', ""))
    if "Entity" not in df.columns or "Year" not in df.columns:
        return df.iloc[0:0].reset_index(drop=True)

    entity = df["Entity"].where(df["Entity"].notna(), "").astype(str).str.strip()
    year = pd.to_numeric(df["Year"], errors="coerce")
    mask = (entity != "") & year.notna() & (year != 0)

    out = df.loc[mask].copy()
    out["Entity"] = entity[mask]
    out["Year"] = year[mask].astype("int64")
    return out.reset_index(drop=True)


def _infer_numeric(df: pd.DataFrame) -> pd.DataFrame:
    """Convierte a número las columnas que lo son por completo."""
    for col in df.columns:
        try:
            df[col] = pd.to_numeric(df[col])
        except (TypeError, ValueError):
            continue
    return df


def _read_csv(source, label: str) -> pd.DataFrame:
    """Lee un CSV; en filas con más campos que la cabecera se ignoran los sobrantes.

    La cabecera se lee primero para conocer el ancho. El cuerpo se lee sin
    cabecera (la primera fila es la propia cabecera), así pandas no toma la
    primera columna como índice cuando las filas terminan en coma.
    """
    truncated = []

    def keep_header_fields(fields: list) -> list:
        if any(str(v).strip() for v in fields[width:]):
            truncated.append(fields)
        return fields[:width]

    try:
        columns = list(pd.read_csv(source, nrows=0, index_col=False, skipinitialspace=True).columns)
        width = len(columns)
        if hasattr(source, "seek"):
            source.seek(0)
        body = pd.read_csv(
            source,
            header=None,
            skipinitialspace=True,
            engine="python",
            on_bad_lines=keep_header_fields,
        )
    except pd.errors.EmptyDataError:
        return pd.DataFrame(columns=RAW_KEY_COLUMNS)
    except Exception as exc:
        raise DatasetLoadError(f"Error al cargar archivo: {label}") from exc

    body = body.iloc[1:].reset_index(drop=True)
    body.columns = columns
    raw = clean_raw_rows(_infer_numeric(body))
    if truncated:
        logger.warning(
            "%s: %d filas con más valores que columnas; se ignoraron los sobrantes",
            label, len(truncated),
        )
    raw.attrs[TRUNCATED_ROWS] = len(truncated)
    return raw


def parse_csv_text(csv_text: str) -> pd.DataFrame:
    """CSV en texto -> filas; los campos entre comillas pueden contener comas."""
    return _read_csv(StringIO(csv_text.strip()), "texto CSV")


def read_csv_location(location: str) -> pd.DataFrame:
    """Lee un CSV desde URL o ruta local."""
    df = _read_csv(location, location)
    logger.info("CSV %s cargado: %d registros", location, len(df))
    return df


def truncated_rows_warning(raw: pd.DataFrame, name: str) -> str | None:
    count = raw.attrs.get(TRUNCATED_ROWS, 0)
    if not count:
        return None
    return f"{name}: {count} fila(s) con más valores que columnas; se ignoraron los valores sobrantes"


def validate_schema(raw: pd.DataFrame, dataset: dict) -> list:
    name = dataset.get("name", "dataset")
    warns = []
    for col in dataset.get("schema", []):
        if col not in raw.columns:
            warns.append(f"Falta columna en {name}: {col}")
    truncated = truncated_rows_warning(raw, name)
    if truncated:
        warns.append(truncated)
    return warns


# ---------------------------#
# Estimaciones
# ---------------------------#
def year_factor(year: int) -> float:
    for min_year, factor in YEAR_FACTORS:
        if year >= min_year:
            return factor
    return OLDEST_YEAR_FACTOR


def estimate_total_electricity_consumption(country: str, year: int, renewable_production: float) -> float:
    """Consumo eléctrico total estimado (TWh) para un país y año."""
    base = COUNTRY_CONSUMPTION_TWH.get(country, DEFAULT_CONSUMPTION_TWH)
    adjusted = base * year_factor(year)
    # Si la producción renovable supera el estimado, se ajusta hacia arriba
    return max(adjusted, renewable_production * RENEWABLE_HEADROOM)


# ---------------------------#
# Conversores
# ---------------------------#
def numeric_column(df: pd.DataFrame, col: str) -> pd.Series:
    """Columna numérica con inválidos/faltantes en 0."""
    if col not in df.columns:
        return pd.Series(0.0, index=df.index)
    return pd.to_numeric(df[col], errors="coerce").fillna(0.0).astype(float)


def _base_records(data: pd.DataFrame) -> pd.DataFrame:
    out = pd.DataFrame({
        "year": data["Year"].astype("int64") if "Year" in data.columns else pd.Series(dtype="int64"),
        "country": data["Entity"] if "Entity" in data.columns else pd.Series(dtype="object"),
    })
    for col in NUMERIC_COLUMNS:
        out[col] = 0.0
    # NaN = no se puede calcular el porcentaje renovable total
    out["share_electricity_renewables"] = np.nan
    return out[RENEWABLE_COLUMNS]


def _single_source(data: pd.DataFrame, value_col: str, target_col: str) -> pd.DataFrame:
    out = _base_records(data)
    production = numeric_column(data, value_col)
    out[target_col] = production
    out["modern_renewable_energy_consumption"] = production
    return out


def convert_solar_share_data(data: pd.DataFrame) -> pd.DataFrame:
    return _single_source(data, "Solar (% equivalent primary energy)", "solar_energy_consumption")


def convert_wind_share_data(data: pd.DataFrame) -> pd.DataFrame:
    return _single_source(data, "Wind (% equivalent primary energy)", "wind_generation")


def convert_hydro_share_data(data: pd.DataFrame) -> pd.DataFrame:
    return _single_source(data, "Hydro (% equivalent primary energy)", "hydropower_consumption")


def convert_renewable_share_data(data: pd.DataFrame) -> pd.DataFrame:
    """Total renovable (TWh) repartido con la distribución típica regional."""
    out = _base_records(data)
    total = numeric_column(data, "Renewables (% equivalent primary energy)")
    for col, weight in RENEWABLE_SPLIT.items():
        out[col] = total * weight
    out["modern_renewable_energy_consumption"] = total
    return out


def convert_latam_renewable_data(data: pd.DataFrame) -> pd.DataFrame:
    """Único dataset con porcentajes: el total eléctrico se estima por país/año."""
    out = _base_records(data)
    wind = numeric_column(data, "Electricity from wind (TWh)")
    hydro = numeric_column(data, "Electricity from hydro (TWh)")
    solar = numeric_column(data, "Electricity from solar (TWh)")
    other = numeric_column(data, "Other renewables including bioenergy (TWh)")
    total_renewable = wind + hydro + solar + other

    estimated = pd.Series(
        [
            estimate_total_electricity_consumption(c, int(y), r)
            for c, y, r in zip(out["country"], out["year"], total_renewable)
        ],
        index=out.index,
        dtype=float,
    )
    denom = estimated.where(estimated > 0)

    def capped_share(values: pd.Series, cap: float) -> pd.Series:
        return (values / denom * 100).clip(upper=cap).fillna(0.0).round(1)

    out["wind_generation"] = wind
    out["solar_energy_consumption"] = solar
    out["hydropower_consumption"] = hydro
    out["biofuel_production"] = other
    out["share_electricity_renewables"] = capped_share(total_renewable, SHARE_CAPS["share_electricity_renewables"])
    out["share_electricity_wind"] = capped_share(wind, SHARE_CAPS["share_electricity_wind"])
    out["share_electricity_solar"] = capped_share(solar, SHARE_CAPS["share_electricity_solar"])
    out["share_electricity_hydro"] = capped_share(hydro, SHARE_CAPS["share_electricity_hydro"])
    out["cumulative_installed_wind_energy_capacity_gigawatts"] = wind * WIND_CAPACITY_FACTOR
    out["installed_solar_pv_capacity"] = solar * SOLAR_CAPACITY_FACTOR
    out["modern_renewable_energy_consumption"] = total_renewable
    out["conventional_energy_consumption"] = (estimated - total_renewable).clip(lower=0)
    return out


CONVERTERS = {
    "solar-share-latam": convert_solar_share_data,
    "latam-renewable-production": convert_latam_renewable_data,
    "wind-share-latam": convert_wind_share_data,
    "hydro-share-latam": convert_hydro_share_data,
    "renewable-share-latam": convert_renewable_share_data,
}


def convert_dataset(file_id: str, raw: pd.DataFrame) -> pd.DataFrame:
    get_dataset(file_id)
    return CONVERTERS[file_id](raw)


def load_raw_dataset(file_id: str, base: str | None = None) -> pd.DataFrame:
    dataset = get_dataset(file_id)
    location = resolve_data_location(dataset["filename"], base)
    logger.info("Cargando archivo: %s", dataset["name"])
    return read_csv_location(location)


def load_csv_file(file_id: str, base: str | None = None) -> pd.DataFrame:
    """Carga un dataset predefinido y lo convierte al esquema común."""
    raw = load_raw_dataset(file_id, base)
    return convert_dataset(file_id, raw)
