import logging
import math

import pandas as pd
import pytest

from neowatts.datasets import (
    NUMERIC_COLUMNS,
    PREDEFINED_FILES,
    RENEWABLE_COLUMNS,
    TRUNCATED_ROWS,
    DatasetLoadError,
    DatasetNotFoundError,
    convert_hydro_share_data,
    convert_renewable_share_data,
    convert_solar_share_data,
    convert_wind_share_data,
    estimate_total_electricity_consumption,
    load_csv_file,
    load_raw_dataset,
    parse_csv_text,
    validate_schema,
    year_factor,
)


class TestParseCsvText:
    def test_drops_rows_without_entity_or_year(self):
        text = (
            'Entity,Code,"Year","Electricity from wind (TWh)"\n'
            "Brazil,BRA,2020,57.05\n"
            '"Bolivia, Plurinational State",BOL,2020,0.1\n'
            ",,2020,1\n"
            "Chile,CHL,,3\n"
        )
        rows = parse_csv_text(text)

        assert list(rows["Entity"]) == ["Brazil", "Bolivia, Plurinational State"]
        assert list(rows["Year"]) == [2020, 2020]
        assert rows["Year"].dtype == "int64"
        assert rows.loc[0, "Electricity from wind (TWh)"] == pytest.approx(57.05)

    def test_header_whitespace_is_stripped(self):
        rows = parse_csv_text("Entity , Code , Year , Hydro (% equivalent primary energy)\nPeru, PER, 2001, 4.2\n")
        assert list(rows.columns) == ["Entity", "Code", "Year", "Hydro (% equivalent primary energy)"]
        assert rows.loc[0, "Entity"] == "Peru"

    def test_empty_text_gives_no_rows(self):
        assert parse_csv_text("").empty

    def test_missing_key_columns_gives_no_rows(self):
        assert parse_csv_text("Country,Value\nPeru,1\n").empty


class TestRowWidths:
    HEADER = "Entity,Code,Year,Electricity from wind (TWh)\n"

    def test_trailing_delimiter_on_every_row(self):
        rows = parse_csv_text(self.HEADER + "Brazil,BRA,2020,57,\nChile,CHL,2020,3,\n")

        assert list(rows.columns) == ["Entity", "Code", "Year", "Electricity from wind (TWh)"]
        assert list(rows["Entity"]) == ["Brazil", "Chile"]
        assert list(rows["Year"]) == [2020, 2020]
        assert list(rows["Electricity from wind (TWh)"]) == [57, 3]
        # comas finales sin valor no cuentan como recorte
        assert rows.attrs[TRUNCATED_ROWS] == 0

    def test_extra_values_are_dropped_and_counted(self, caplog):
        with caplog.at_level(logging.WARNING, logger="neowatts.datasets"):
            rows = parse_csv_text(self.HEADER + "Brazil,BRA,2020,57\nChile,CHL,2020,3,9\n")

        assert list(rows["Entity"]) == ["Brazil", "Chile"]
        assert list(rows["Electricity from wind (TWh)"]) == [57, 3]
        assert rows.attrs[TRUNCATED_ROWS] == 1
        assert "1 filas con más valores que columnas" in caplog.text

    def test_extra_values_on_first_row_do_not_shift_columns(self):
        rows = parse_csv_text(self.HEADER + "Brazil,BRA,2020,57,x\nChile,CHL,2021,3\n")

        assert list(rows["Entity"]) == ["Brazil", "Chile"]
        assert list(rows["Year"]) == [2020, 2021]
        assert rows.attrs[TRUNCATED_ROWS] == 1

    def test_missing_trailing_fields_are_empty(self):
        rows = parse_csv_text(self.HEADER + "Brazil,BRA,2020\nChile,CHL,2020,3\n")

        assert list(rows["Entity"]) == ["Brazil", "Chile"]
        assert math.isnan(rows.loc[0, "Electricity from wind (TWh)"])
        assert rows.loc[1, "Electricity from wind (TWh)"] == 3

    def test_escaped_quotes_inside_quoted_field(self):
        rows = parse_csv_text(self.HEADER + '"Côte ""Ivoire"", Rep.",CIV,2020,0.1\n')

        assert rows.loc[0, "Entity"] == 'Côte "Ivoire", Rep.'
        assert rows.loc[0, "Electricity from wind (TWh)"] == pytest.approx(0.1)

    def test_validate_schema_reports_truncated_rows(self):
        raw = parse_csv_text(
            "Entity,Code,Year,Wind (% equivalent primary energy)\nPeru,PER,2019,1,2\n"
        )
        warns = validate_schema(raw, PREDEFINED_FILES["wind-share-latam"])
        assert warns == [
            "Producción Eólica en América Latina: 1 fila(s) con más valores que columnas; "
            "se ignoraron los valores sobrantes"
        ]

    def test_truncated_rows_survive_file_loading(self, tmp_path):
        (tmp_path / "wind_share_energy_latam.csv").write_text(
            "Entity,Code,Year,Wind (% equivalent primary energy)\nPeru,PER,2019,1,2\nPeru,PER,2020,3\n",
            encoding="utf-8",
        )
        raw = load_raw_dataset("wind-share-latam", base=str(tmp_path))
        assert raw.attrs[TRUNCATED_ROWS] == 1
        assert list(convert_wind_share_data(raw)["wind_generation"]) == [1.0, 3.0]


class TestEstimates:
    @pytest.mark.parametrize("year,factor", [
        (2023, 1.0), (2020, 1.0), (2015, 0.9), (2014, 0.8), (2005, 0.7),
        (2000, 0.6), (1995, 0.5), (1990, 0.4), (1989, 0.3), (1965, 0.3),
    ])
    def test_year_factor(self, year, factor):
        assert year_factor(year) == factor

    def test_known_country(self):
        assert estimate_total_electricity_consumption("Brazil", 2021, 10) == 500

    def test_unknown_country_uses_default(self):
        assert estimate_total_electricity_consumption("Atlantis", 1985, 0) == pytest.approx(6.0)

    def test_raised_when_renewables_exceed_estimate(self):
        assert estimate_total_electricity_consumption("Chile", 2012, 100) == pytest.approx(120.0)


class TestConverters:
    def test_latam_shares_and_estimates(self, latam_records):
        brazil = latam_records.iloc[0]
        assert brazil["share_electricity_renewables"] == pytest.approx(80.0)
        assert brazil["share_electricity_wind"] == pytest.approx(10.0)
        assert brazil["share_electricity_solar"] == pytest.approx(2.0)
        assert brazil["share_electricity_hydro"] == pytest.approx(60.0)
        assert brazil["cumulative_installed_wind_energy_capacity_gigawatts"] == pytest.approx(15.0)
        assert brazil["installed_solar_pv_capacity"] == pytest.approx(2.0)
        assert brazil["modern_renewable_energy_consumption"] == pytest.approx(400.0)
        assert brazil["conventional_energy_consumption"] == pytest.approx(100.0)

    def test_latam_estimate_raised_by_renewables(self, latam_records):
        uruguay_1995 = latam_records.iloc[1]
        # 12 TWh * 0.5 = 6 < 10 * 1.2
        assert uruguay_1995["share_electricity_renewables"] == pytest.approx(83.3)
        assert uruguay_1995["conventional_energy_consumption"] == pytest.approx(2.0)

    def test_latam_output_schema(self, latam_records):
        assert list(latam_records.columns) == RENEWABLE_COLUMNS
        assert len(latam_records) == 3

    def test_solar_values_are_twh_and_share_not_computable(self, solar_csv_text):
        records = convert_solar_share_data(parse_csv_text(solar_csv_text))

        assert list(records["solar_energy_consumption"]) == [8.5, 0.0, 15.0]
        assert list(records["modern_renewable_energy_consumption"]) == [8.5, 0.0, 15.0]
        assert records["share_electricity_renewables"].isna().all()
        assert (records["wind_generation"] == 0).all()

    @pytest.mark.parametrize("converter,column,target", [
        (convert_wind_share_data, "Wind (% equivalent primary energy)", "wind_generation"),
        (convert_hydro_share_data, "Hydro (% equivalent primary energy)", "hydropower_consumption"),
    ])
    def test_single_source_converters(self, converter, column, target):
        raw = pd.DataFrame({"Entity": ["Peru"], "Code": ["PER"], "Year": [2010], column: [3.5]})
        records = converter(raw)
        assert records.loc[0, target] == 3.5
        assert records.loc[0, "year"] == 2010
        assert records.loc[0, "country"] == "Peru"
        assert math.isnan(records.loc[0, "share_electricity_renewables"])

    def test_renewable_total_split(self):
        raw = pd.DataFrame({
            "Entity": ["Colombia"], "Code": ["COL"], "Year": [2018],
            "Renewables (% equivalent primary energy)": [100.0],
        })
        row = convert_renewable_share_data(raw).iloc[0]
        assert row["hydropower_consumption"] == pytest.approx(65.0)
        assert row["wind_generation"] == pytest.approx(20.0)
        assert row["solar_energy_consumption"] == pytest.approx(10.0)
        assert row["biofuel_production"] == pytest.approx(5.0)
        assert row["modern_renewable_energy_consumption"] == pytest.approx(100.0)

    def test_empty_input(self):
        records = convert_solar_share_data(parse_csv_text(""))
        assert records.empty
        assert list(records.columns) == RENEWABLE_COLUMNS
        assert set(NUMERIC_COLUMNS) <= set(records.columns)


class TestLoading:
    def test_load_from_local_directory(self, data_dir):
        records = load_csv_file("latam-renewable-production", base=str(data_dir))
        assert len(records) == 3
        assert set(records["country"]) == {"Brazil", "Uruguay"}

    def test_unknown_dataset(self):
        with pytest.raises(DatasetNotFoundError):
            load_csv_file("no-existe")

    def test_unknown_dataset_is_a_key_error(self):
        with pytest.raises(KeyError):
            load_csv_file("no-existe")

    def test_missing_file(self, tmp_path):
        with pytest.raises(DatasetLoadError):
            load_csv_file("wind-share-latam", base=str(tmp_path))

    def test_validate_schema_reports_missing_columns(self, solar_csv_text):
        raw = parse_csv_text(solar_csv_text)
        assert validate_schema(raw, PREDEFINED_FILES["solar-share-latam"]) == []
        warns = validate_schema(raw, PREDEFINED_FILES["wind-share-latam"])
        assert warns == [
            "Falta columna en Producción Eólica en América Latina: Wind (% equivalent primary energy)"
        ]
