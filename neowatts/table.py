# neowatts/table.py
# Filtrado, orden y paginación de la tabla de datos.

import math

import pandas as pd

ITEMS_PER_PAGE = 10
ALL_COUNTRIES = "all"

TABLE_COLUMNS = {
    "year": "Año",
    "country": "País",
    "wind_generation": "Eólica",
    "solar_energy_consumption": "Solar",
    "hydropower_consumption": "Hidro",
    "share_electricity_renewables": "% Renovable",
}


def filter_and_sort_records(
    records: pd.DataFrame,
    search: str = "",
    country: str = ALL_COUNTRIES,
    sort_field: str = "year",
    direction: str = "desc",
) -> pd.DataFrame:
    term = (search or "").strip().lower()
    mask = pd.Series(True, index=records.index)
    if term:
        mask &= (
            records["country"].astype(str).str.lower().str.contains(term, regex=False)
            | records["year"].astype(str).str.contains(term, regex=False)
        )
    if country and country != ALL_COUNTRIES:
        mask &= records["country"] == country
    filtered = records.loc[mask]
    if sort_field not in filtered.columns:
        sort_field = "year"
    filtered = filtered.sort_values(sort_field, ascending=(direction == "asc"), kind="stable")
    return filtered.reset_index(drop=True)


def toggle_sort(current_field: str, current_direction: str, field: str) -> tuple[str, str]:
    """Clic en una cabecera: invierte el sentido o cambia de columna (ascendente)."""
    if field == current_field:
        return field, "desc" if current_direction == "asc" else "asc"
    return field, "asc"


def paginate(records: pd.DataFrame, page: int, per_page: int = ITEMS_PER_PAGE) -> dict:
    total_pages = max(1, math.ceil(len(records) / per_page))
    page = min(max(1, int(page)), total_pages)
    start = (page - 1) * per_page
    return {
        "rows": records.iloc[start:start + per_page],
        "page": page,
        "total_pages": total_pages,
        "start": start,
        "end": min(start + per_page, len(records)),
        "total": len(records),
    }


def share_level(value) -> str:
    if value is None or pd.isna(value):
        return "sin dato"
    if value > 50:
        return "alta"
    if value > 25:
        return "media"
    return "baja"
