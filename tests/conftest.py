"""Test configuration and shared fixtures."""

import pytest

from neowatts.datasets import convert_latam_renewable_data, parse_csv_text

LATAM_CSV = """Entity,Code,Year,Electricity from wind (TWh),Electricity from hydro (TWh),Electricity from solar (TWh),Other renewables including bioenergy (TWh)
Brazil,BRA,2020,50,300,10,40
Uruguay,URY,1995,0,10,0,0
Uruguay,URY,2020,5,4,1,2
"""

SOLAR_CSV = """Entity,Code,Year,Solar (% equivalent primary energy)
Chile,CHL,2019,8.5
Chile,CHL,2020,abc
Mexico,MEX,2020,15
"""


@pytest.fixture
def latam_csv_text():
    return LATAM_CSV


@pytest.fixture
def solar_csv_text():
    return SOLAR_CSV


@pytest.fixture
def latam_records():
    return convert_latam_renewable_data(parse_csv_text(LATAM_CSV))


@pytest.fixture
def data_dir(tmp_path):
    """Carpeta de datos temporal con los CSV predefinidos de prueba."""
    (tmp_path / "latam_modern_renewable_prod.csv").write_text(LATAM_CSV, encoding="utf-8")
    (tmp_path / "solar_share_energy_latam.csv").write_text(SOLAR_CSV, encoding="utf-8")
    return tmp_path
