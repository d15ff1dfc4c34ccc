from neowatts import aggregations, charts


def test_figures_have_one_trace_per_series(latam_records):
    charts.set_plotly_theme()

    bar = charts.bar_figure(aggregations.bar_chart_data(latam_records))
    assert {t.name for t in bar.data} == {"Eólica", "Solar", "Hidroeléctrica", "Biocombustibles", "Geotérmica"}

    line = charts.line_figure(aggregations.line_chart_data(latam_records))
    assert len(line.data) == 3

    area = charts.area_figure(aggregations.area_chart_data(latam_records))
    assert {t.name for t in area.data} == {"Energía Renovable", "Energía Convencional"}


def test_pie_figure_uses_slice_colors(latam_records):
    pie_df = aggregations.pie_chart_data(latam_records)
    fig = charts.pie_figure(pie_df, suffix=" TWh")
    assert fig.layout.title.text == "Participación de Energías Renovables"
    assert "TWh" in fig.data[0].texttemplate
