import json

import pytest

from neowatts.datasets import RENEWABLE_COLUMNS
from neowatts.uploader import (
    SAMPLE_COUNTRIES,
    SAMPLE_RANGES,
    generate_sample_data,
    parse_uploaded_file,
)


def test_json_with_original_keys():
    payload = [
        {"year": 2021, "country": "Costa Rica", "wind-generation": 1.5,
         "installed-solar-PV-capacity": 0.1, "share-electricity-renewables": 98.5},
        {"year": None, "country": "Ignorado"},
    ]
    records = parse_uploaded_file("datos.json", json.dumps(payload).encode("utf-8"))

    assert list(records.columns) == RENEWABLE_COLUMNS
    assert len(records) == 1
    row = records.iloc[0]
    assert row["country"] == "Costa Rica"
    assert row["wind_generation"] == 1.5
    assert row["installed_solar_pv_capacity"] == 0.1
    assert row["share_electricity_renewables"] == 98.5
    assert row["hydropower_consumption"] == 0


def test_csv_upload():
    text = "year,country,hydropower-consumption\n2019,Panama,6.1\n,Panama,1\n"
    records = parse_uploaded_file("datos.csv", text)
    assert len(records) == 1
    assert records.loc[0, "hydropower_consumption"] == pytest.approx(6.1)
    assert records["share_electricity_renewables"].isna().all()


@pytest.mark.parametrize("name,content", [
    ("datos.json", b"{not json"),
    ("datos.json", b'{"year": 2020}'),
    ("datos.csv", b"country,value\nPeru,1\n"),
    ("datos.csv", b""),
])
def test_malformed_upload(name, content):
    with pytest.raises(ValueError, match="Verifica el formato"):
        parse_uploaded_file(name, content)


def test_sample_data_shape_and_ranges():
    data = generate_sample_data(seed=7)

    assert len(data) == 25
    assert set(data["country"]) == set(SAMPLE_COUNTRIES)
    assert sorted(data["year"].unique()) == [2018, 2019, 2020, 2021, 2022]
    for col, (low, span) in SAMPLE_RANGES.items():
        assert data[col].between(low, low + span).all()


def test_sample_data_is_reproducible_with_seed():
    assert generate_sample_data(seed=1).equals(generate_sample_data(seed=1))


@pytest.mark.parametrize("name,content", [
    ("datos.json", b"[]"),
    ("datos.csv", b"year,country,wind-generation\n"),
])
def test_upload_without_records(name, content):
    records = parse_uploaded_file(name, content)
    assert records.empty
    assert list(records.columns) == RENEWABLE_COLUMNS
