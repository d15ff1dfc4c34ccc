# app.py
# ============================================================
# DASHBOARD: NeOWatts — Energía Renovable en América Latina
# - Datasets CSV predefinidos (producción / capacidad / participación)
# - Barras, torta, líneas y área con agregación por año
# - Calculadora: qué parte de tu consumo es renovable
# - Contenido informativo sobre fuentes de energía
# ============================================================

from pathlib import Path
import logging

import pandas as pd
import streamlit as st

from neowatts import aggregations, charts, content
from neowatts.calculator import (
    INSTALLED_RENEWABLE_GW,
    NATIONAL_DEMAND_GW,
    calculate_renewable_percentage,
    calculator_options,
    estimate_renewable_potential,
)
from neowatts.chart_data import (
    CHART_DATA_FILES,
    PIE_SOURCES,
    LINE_SOURCES,
    load_single_chart_file,
    process_bar_chart_data,
    process_line_chart_data,
    process_pie_chart_data,
)
from neowatts.config import CACHE_TTL, DATA_SOURCE, configure_logging, emit_info
from neowatts.datasets import (
    PREDEFINED_FILES,
    DatasetLoadError,
    DatasetNotFoundError,
    convert_dataset,
    load_raw_dataset,
    truncated_rows_warning,
    validate_schema,
)
from neowatts.table import (
    ALL_COUNTRIES,
    TABLE_COLUMNS,
    filter_and_sort_records,
    paginate,
    share_level,
    toggle_sort,
)
from neowatts.uploader import generate_sample_data, parse_uploaded_file

configure_logging()
logger = logging.getLogger("neowatts.app")

# ---------------------------#
# Configuración de la app
# ---------------------------#
st.set_page_config(
    page_title="NeOWatts — Energía Renovable LATAM",
    page_icon="🌿",
    layout="wide",
    initial_sidebar_state="expanded",
)


def inject_local_css(path: str = "assets/style.css"):
    p = Path(__file__).parent / path
    if p.exists():
        st.markdown(f"<style>{p.read_text(encoding='utf-8')}</style>", unsafe_allow_html=True)


inject_local_css()
charts.set_plotly_theme()

SOURCE_PREDEFINED = "Dataset predefinido"
SOURCE_SAMPLE = "Datos de ejemplo"
SOURCE_UPLOAD = "Subir archivo (CSV/JSON)"


# ---------------------------#
# Carga con caché
# ---------------------------#
@st.cache_data(show_spinner=True, ttl=CACHE_TTL)
def cached_raw_dataset(file_id: str, base: str) -> pd.DataFrame:
    return load_raw_dataset(file_id, base)


@st.cache_data(show_spinner=True, ttl=CACHE_TTL)
def cached_chart_file(file_id: str, base: str) -> pd.DataFrame:
    return load_single_chart_file(file_id, base)


def fmt(x, d=1, default="—"):
    try:
        return f"{float(x):,.{d}f}"
    except (TypeError, ValueError):
        return default


def show_load_error(exc: Exception, what: str):
    logger.exception("Error cargando %s", what)
    st.error(f"No se pudieron cargar los datos ({what}). {exc}")


def show_parse_warnings(frames: dict):
    for fid, raw in frames.items():
        w = truncated_rows_warning(raw, CHART_DATA_FILES[fid]["name"])
        if w:
            st.warning("• " + w)


# ---------------------------#
# Sidebar (fuente de datos)
# ---------------------------#
if "sample_data" not in st.session_state:
    st.session_state.sample_data = None
if "banner_index" not in st.session_state:
    st.session_state.banner_index = 0
if "sort" not in st.session_state:
    st.session_state.sort = ("year", "desc")

with st.sidebar:
    st.markdown("## 🌿 NeOWatts")
    st.caption("Datos históricos de energía renovable en América Latina.")
    source = st.radio("Fuente de datos", [SOURCE_PREDEFINED, SOURCE_SAMPLE, SOURCE_UPLOAD])

records = pd.DataFrame()
dataset_label = ""

if source == SOURCE_PREDEFINED:
    with st.sidebar:
        file_ids = list(PREDEFINED_FILES)
        file_id = st.selectbox(
            "Dataset",
            file_ids,
            index=file_ids.index("latam-renewable-production"),
            format_func=lambda k: PREDEFINED_FILES[k]["name"],
        )
        dataset = PREDEFINED_FILES[file_id]
        st.caption(dataset["description"])
        st.caption(f"{dataset['type']} · {dataset['size']} · ~{dataset['records']:,} registros")
    try:
        raw = cached_raw_dataset(file_id, DATA_SOURCE)
    except (DatasetLoadError, DatasetNotFoundError) as exc:
        show_load_error(exc, dataset["name"])
    else:
        for w in validate_schema(raw, dataset):
            st.warning("• " + w)
        records = convert_dataset(file_id, raw)
        dataset_label = dataset["name"]
        emit_info(f"{dataset['name']}: {len(records)} registros cargados")

elif source == SOURCE_SAMPLE:
    with st.sidebar:
        if st.button("Cargar datos de ejemplo", use_container_width=True):
            st.session_state.sample_data = generate_sample_data()
            st.success(f"Datos de ejemplo cargados: {len(st.session_state.sample_data)} registros")
    if st.session_state.sample_data is not None:
        records = st.session_state.sample_data
        dataset_label = SOURCE_SAMPLE

else:
    with st.sidebar:
        uploaded = st.file_uploader("Archivo CSV o JSON", type=["csv", "json"])
    if uploaded is not None:
        try:
            records = parse_uploaded_file(uploaded.name, uploaded.getvalue())
        except ValueError as exc:
            st.error(str(exc))
        else:
            dataset_label = uploaded.name
            with st.sidebar:
                st.success(f"Datos cargados exitosamente: {len(records)} registros")

# ---------------------------#
# Header
# ---------------------------#
st.markdown(
    f"""
    <div class="topbar">
      <div class="brand"><h1>{content.HERO['title']}</h1></div>
      <p class="subtitle">{content.HERO['subtitle']}</p>
    </div>
    """,
    unsafe_allow_html=True,
)

tab_home, tab_dash, tab_files, tab_calc, tab_data = st.tabs([
    "Inicio",
    "Dashboard",
    "Gráficos por archivo",
    "Calculadora",
    "Datos",
])

# ---- Inicio ----
with tab_home:
    st.write(content.HERO["body"])

    st.subheader("Energía Solar en Colombia")
    c1, c2 = st.columns(2)
    with c1:
        k1, k2 = st.columns(2)
        k1.metric("Radiación promedio", f"{content.SOLAR_POTENTIAL['irradiance_kwh_m2_day']} kWh/m²/día")
        k2.metric("Capacidad instalada", f"{content.SOLAR_POTENTIAL['installed_gw']} GW")
        st.write(content.SOLAR_POTENTIAL["text"])
    with c2:
        st.markdown("**Beneficios de la Energía Solar**")
        for benefit in content.SOLAR_BENEFITS:
            st.markdown(f"✓ {benefit}")

    cols = st.columns(len(content.BENEFITS))
    for col, benefit in zip(cols, content.BENEFITS):
        col.markdown(f"### {benefit['icon']}\n**{benefit['title']}**\n\n{benefit['description']}")

    st.subheader("Fuentes de energía")
    n_banners = len(content.ENERGY_BANNERS)
    b_prev, b_body, b_next = st.columns([1, 10, 1], vertical_alignment="center")
    if b_prev.button("◀", key="banner_prev"):
        st.session_state.banner_index = content.previous_banner_index(st.session_state.banner_index, n_banners)
    if b_next.button("▶", key="banner_next"):
        st.session_state.banner_index = content.next_banner_index(st.session_state.banner_index, n_banners)
    banner = content.ENERGY_BANNERS[st.session_state.banner_index]
    with b_body:
        st.markdown(f"## {banner['icon']} {banner['title']}")
        st.markdown(f"*{banner['description']}*")
        st.write(banner["main_description"])
        for detail in banner["details"]:
            st.markdown(f"- {detail}")
        st.caption(f"{st.session_state.banner_index + 1} / {n_banners}")

    st.markdown("**Comparativa de fuentes**")
    st.dataframe(
        pd.DataFrame([
            {"Fuente": c["source"], "Eficiencia": c["efficiency"], "Costo": c["cost"].value, "Emisiones": c["emissions"]}
            for c in content.COMPARISONS
        ]),
        use_container_width=True,
        hide_index=True,
    )

# ---- Dashboard ----
with tab_dash:
    if records.empty:
        st.info("Dashboard no disponible. Carga datos desde la barra lateral para ver las visualizaciones.")
    else:
        st.subheader("📊 Dashboard de Energía Renovable")
        st.caption(f"Análisis visual de {len(records)} registros históricos — {dataset_label}")

        stats = aggregations.summary_stats(records)
        m1, m2, m3, m4 = st.columns(4)
        m1.metric("Total Registros", f"{stats['records']:,}")
        m2.metric("Países", stats["countries"])
        m3.metric("Años Cubiertos", stats["years_covered"], f"{stats['year_min']} - {stats['year_max']}", delta_color="off")
        avg = stats["avg_renewable_share"]
        m4.metric("Promedio Renovable", "—" if avg is None else f"{avg:.1f}%")

        st.plotly_chart(
            charts.bar_figure(aggregations.bar_chart_data(records)),
            use_container_width=True, key=f"dash_bar_{dataset_label}",
        )

        pie_df = aggregations.pie_chart_data(records)
        if pie_df.empty:
            st.info("Este dataset no trae participaciones por fuente; el gráfico de torta no está disponible.")
        else:
            st.plotly_chart(
                charts.pie_figure(pie_df, title="Participación de Energías Renovables (último año)"),
                use_container_width=True, key=f"dash_pie_{dataset_label}",
            )

        st.plotly_chart(
            charts.line_figure(aggregations.line_chart_data(records)),
            use_container_width=True, key=f"dash_line_{dataset_label}",
        )
        st.plotly_chart(
            charts.area_figure(aggregations.area_chart_data(records)),
            use_container_width=True, key=f"dash_area_{dataset_label}",
        )

# ---- Gráficos por archivo ----
with tab_files:
    st.subheader("Gráficos con archivos específicos")
    try:
        bar_rows = cached_chart_file("bar-chart-renewable-consumption", DATA_SOURCE)
    except DatasetLoadError as exc:
        show_load_error(exc, CHART_DATA_FILES["bar-chart-renewable-consumption"]["name"])
    else:
        show_parse_warnings({"bar-chart-renewable-consumption": bar_rows})
        bar_df = process_bar_chart_data(bar_rows)
        st.plotly_chart(
            charts.bar_figure(bar_df, title=CHART_DATA_FILES["bar-chart-renewable-consumption"]["name"]),
            use_container_width=True, key="files_bar",
        )

    try:
        pie_frames = {fid: cached_chart_file(fid, DATA_SOURCE) for _name, fid, _col, _color in PIE_SOURCES}
    except DatasetLoadError as exc:
        show_load_error(exc, "gráfico de torta")
    else:
        show_parse_warnings(pie_frames)
        pie = process_pie_chart_data(
            pie_frames["pie-chart-hydropower"],
            pie_frames["pie-chart-wind"],
            pie_frames["pie-chart-biofuel"],
            pie_frames["pie-chart-solar"],
            pie_frames["pie-chart-geothermal"],
        )
        if pie["year"] is None:
            st.info("Sin datos para el gráfico de torta.")
        else:
            suffix = " TWh" if pie["use_absolute_values"] else "%"
            st.plotly_chart(
                charts.pie_figure(pie["data"], title=f"Generación renovable LATAM — {pie['year']}", suffix=suffix),
                use_container_width=True, key="files_pie",
            )
            st.caption(f"Total {fmt(pie['total'], 2)} TWh · geotérmica estimada desde capacidad instalada (MW).")

    try:
        line_frames = {fid: cached_chart_file(fid, DATA_SOURCE) for _label, fid, _col, _div in LINE_SOURCES}
    except DatasetLoadError as exc:
        show_load_error(exc, "gráfico de líneas")
    else:
        show_parse_warnings(line_frames)
        line_df = process_line_chart_data(
            line_frames["line-chart-wind-capacity"],
            line_frames["line-chart-solar-capacity"],
            line_frames["line-chart-geothermal-capacity"],
        )
        st.plotly_chart(
            charts.line_figure(line_df, title="Capacidad instalada LATAM (GW)"),
            use_container_width=True, key="files_line",
        )

# ---- Calculadora ----
with tab_calc:
    st.subheader("🧮 Calcula tu Potencial Renovable")
    q1, q2 = st.columns(2)
    with q1:
        quick_kwh = st.number_input("Consumo Eléctrico Mensual (kWh)", min_value=0.0, value=None,
                                    placeholder="Ej: 350", key="quick_kwh")
    with q2:
        potential = estimate_renewable_potential(quick_kwh)
        if potential is not None and quick_kwh:
            st.metric("Consumo renovable posible mensual", f"{potential} kWh",
                      f"{round(potential / quick_kwh * 100)}% de tu consumo", delta_color="off")
        st.caption(
            f"Capacidad renovable instalada: {INSTALLED_RENEWABLE_GW} GW · "
            f"Consumo total nacional: {NATIONAL_DEMAND_GW} GW"
        )

    st.divider()
    st.subheader("Calculadora por país y año")
    if records.empty:
        st.info("Calculadora no disponible. Carga datos desde la barra lateral.")
    else:
        countries, years = calculator_options(records)
        f1, f2, f3 = st.columns(3)
        consumption = f1.number_input("Consumo mensual (kWh)", min_value=0.0, value=None, placeholder="Ej: 350")
        country = f2.selectbox("País", countries, index=None, placeholder="Selecciona un país")
        year = f3.selectbox("Año", years, index=None, placeholder="Selecciona un año")
        if st.button("Calcular Energía Renovable", disabled=not (consumption and country and year)):
            try:
                result = calculate_renewable_percentage(records, consumption, country, year)
            except (ValueError, LookupError) as exc:
                st.warning(str(exc))
            else:
                st.success(f"✅ Cálculo completado para {country} en {year}")
                r1, r2, r3 = st.columns(3)
                r1.metric("Renovable", f"{result['renewable_percentage']:.1f}%")
                r2.metric("Energía Renovable", f"{result['renewable_consumption']:.1f} kWh")
                r3.metric("Energía Convencional", f"{result['conventional_consumption']:.1f} kWh")
                st.progress(min(max(result["renewable_percentage"] / 100, 0.0), 1.0))
                if result["breakdown"]:
                    st.markdown("**Desglose por Fuente Renovable**")
                    st.dataframe(
                        pd.DataFrame(result["breakdown"]).rename(columns={
                            "source": "Fuente", "percentage": "%", "consumption": "kWh",
                        }).round(1),
                        use_container_width=True,
                        hide_index=True,
                    )
        st.caption(
            "Nota: los cálculos son estimaciones basadas en datos históricos del mix energético "
            "nacional. El consumo real puede variar según la región y proveedor."
        )

# ---- Datos ----
with tab_data:
    if records.empty:
        st.info("No hay datos disponibles. Carga un archivo desde la barra lateral.")
    else:
        st.subheader("📋 Tabla de Datos Energéticos")
        s1, s2 = st.columns([3, 1])
        search = s1.text_input("Buscar por país o año...")
        country_filter = s2.selectbox(
            "Filtrar por país",
            [ALL_COUNTRIES] + sorted(records["country"].unique().tolist()),
            format_func=lambda c: "Todos los países" if c == ALL_COUNTRIES else c,
        )

        sort_field, sort_dir = st.session_state.sort
        header_cols = st.columns(len(TABLE_COLUMNS))
        for col, (field, label) in zip(header_cols, TABLE_COLUMNS.items()):
            arrow = (" ↑" if sort_dir == "asc" else " ↓") if field == sort_field else ""
            if col.button(label + arrow, key=f"sort_{field}", use_container_width=True):
                st.session_state.sort = toggle_sort(sort_field, sort_dir, field)
                st.rerun()

        table = filter_and_sort_records(records, search, country_filter, sort_field, sort_dir)
        page_no = st.number_input("Página", min_value=1, value=1, step=1)
        page = paginate(table, page_no)
        view = page["rows"][list(TABLE_COLUMNS)].copy()
        view["Nivel renovable"] = view["share_electricity_renewables"].map(share_level)
        st.dataframe(
            view.rename(columns=TABLE_COLUMNS).round(1),
            use_container_width=True,
            hide_index=True,
        )
        if page["total"]:
            st.caption(
                f"Mostrando {page['start'] + 1} a {page['end']} de {page['total']} registros · "
                f"Página {page['page']} de {page['total_pages']}"
            )
        st.download_button(
            "Descargar datos (CSV)",
            data=table.to_csv(index=False),
            file_name="neowatts_datos.csv",
            mime="text/csv",
        )

# ---------------------------#
# Fuente + Footer
# ---------------------------#
st.markdown("---")
st.markdown(
    '<div class="source-note">Fuentes de datos: ' + " · ".join(content.DATA_SOURCES) + "</div>",
    unsafe_allow_html=True,
)
st.markdown(
    '<div class="footer">© <b>Transición Energética Justa</b> — Proyecto educativo.</div>',
    unsafe_allow_html=True,
)
