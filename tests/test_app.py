from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture
def app_without_data(tmp_path, monkeypatch):
    """La app apuntando a una carpeta de datos vacía."""
    monkeypatch.setattr("neowatts.config.DATA_SOURCE", str(tmp_path))
    return AppTest.from_file(str(APP_PATH), default_timeout=60).run()


def test_failed_loads_are_reported(app_without_data):
    at = app_without_data
    assert not at.exception

    errors = [e.value for e in at.error]
    assert any("Producción Renovable América Latina" in e for e in errors)
    assert any("gráfico de torta" in e for e in errors)
    assert any("gráfico de líneas" in e for e in errors)


def test_page_renders_without_data(app_without_data):
    at = app_without_data

    assert len(at.tabs) == 5
    assert any("Dashboard no disponible" in i.value for i in at.info)
    assert any("Transición Energética Justa" in m.value for m in at.markdown)
