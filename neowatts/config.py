# neowatts/config.py
# ============================================================
# Configuración por variables de entorno + logging
# ============================================================

from pathlib import Path
import os
import logging

import streamlit as st

try:
    from streamlit.runtime.scriptrunner import get_script_run_ctx
except ModuleNotFoundError:  # streamlit < 1.20 o cambios internos
    get_script_run_ctx = None

ROOT_DIR = Path(__file__).resolve().parent.parent
DEFAULT_DATA_DIR = ROOT_DIR / "data"

# Production mode (Render/CI): avisos solo al log
PRODUCTION = bool(
    os.environ.get("NEOWATTS_PRODUCTION")
    or os.environ.get("RENDER")
    or os.environ.get("RENDER_EXTERNAL_URL")
    or os.environ.get("STREAMLIT_PROD")
)

DATA_SOURCE = os.environ.get("NEOWATTS_DATA_URL", str(DEFAULT_DATA_DIR))
CACHE_TTL = int(os.environ.get("NEOWATTS_CACHE_TTL", 60 * 60))
LOG_LEVEL = os.environ.get("NEOWATTS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger(__name__)
_LOGGING_CONFIGURED = False


def configure_logging(level: str | None = None) -> None:
    """Configura el logging raíz una sola vez (Streamlit re-ejecuta el script)."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return
    root = logging.getLogger()
    root.setLevel(level or LOG_LEVEL)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    _LOGGING_CONFIGURED = True


def is_remote(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def resolve_data_location(filename: str, base: str | None = None) -> str:
    """Une la ubicación base (URL o carpeta local) con el nombre del archivo."""
    base = DATA_SOURCE if base is None else base
    if is_remote(base):
        return base.rstrip("/") + "/" + filename.lstrip("/")
    return str(Path(base) / filename.lstrip("/"))


def emit_info(message: str, *, show_to_user: bool = False) -> None:
    """Registra mensajes informativos; opcionalmente los muestra en la UI."""
    logger.info(message)
    if PRODUCTION and not show_to_user:
        return
    # Fuera de `streamlit run` (tests, scripts) solo queda el log
    if get_script_run_ctx is not None and get_script_run_ctx(suppress_warning=True) is not None:
        st.info(message)
