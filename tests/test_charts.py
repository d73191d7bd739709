import altair as alt
import pydeck as pdk
import pytest

from covid_widgets import config
from covid_widgets.charts import (
  build_cases_geojson,
  calendar_frame,
  calendar_heatmap,
  cases_deck,
  line_chart,
  series_frame,
)
from covid_widgets.normalizer import normalize


def _geojson(*names):
  return {
    "type": "FeatureCollection",
    "features": [{"type": "Feature", "properties": {"name": n}, "geometry": None} for n in names],
  }


def test_calendar_frame_weeks_start_on_sunday(rec):
  # 2020-01-01 was a Wednesday, 2020-01-05 a Sunday
  groups, _ = normalize([rec("2020-01-01", 1), rec("2020-01-04", 3), rec("2020-01-05", 6)])
  frame = calendar_frame(groups, "confirmed_delta")
  assert frame["weekday"].tolist() == [3, 6, 0]
  assert frame["week"].tolist() == [0, 0, 1]
  assert frame["value"].tolist() == [1, 2, 3]


def test_calendar_frame_week_resets_each_year(rec):
  groups, _ = normalize([rec("2020-12-31", 1), rec("2021-01-01", 2)])
  frame = calendar_frame(groups, "confirmed_delta")
  assert frame["week"].tolist() == [52, 0]
  assert frame["year"].tolist() == [2020, 2021]


def test_calendar_heatmap_layout(three_years):
  groups, maxima = normalize(three_years)
  chart = calendar_heatmap(groups, "recovered_delta", max_scale=maxima.recovered_delta_max)
  assert isinstance(chart, alt.FacetChart)
  vl = chart.to_dict()
  assert vl["facet"]["row"]["sort"] == [2020, 2021, 2022]
  assert vl["spec"]["encoding"]["color"]["scale"]["domain"] == [0, 47]


def test_calendar_frame_unknown_field_raises(rec):
  groups, _ = normalize([rec("2020-01-01", 1), rec("2020-01-02", 3)])
  with pytest.raises(KeyError):
    calendar_frame(groups, "confimred_delta")


def test_calendar_heatmap_keeps_empty_weeks(rec):
  # 2020-02-03 falls in week 5; weeks 1-4 have no data
  groups, _ = normalize([rec("2020-01-01", 1), rec("2020-02-03", 4)])
  assert calendar_frame(groups)["week"].tolist() == [0, 5]
  encoding = calendar_heatmap(groups).to_dict()["spec"]["encoding"]
  assert encoding["x"]["scale"]["domain"] == list(range(54))
  assert encoding["y"]["scale"]["domain"] == list(range(7))


def test_calendar_heatmap_empty():
  chart = calendar_heatmap([], max_scale=config.DEFAULT_MAX_SCALE)
  assert chart.to_dict()["spec"]["mark"]["type"] == "rect"


def test_series_frame(country_payload):
  frame = series_frame(country_payload, "Deaths")
  assert frame["value"].tolist() == [34, 52, 79]
  assert frame["date"].dt.day.tolist() == [1, 2, 3]


def test_line_chart(country_payload):
  chart = line_chart(series_frame(country_payload, "Confirmed"), "Confirmed", config.CONFIRMED_COLOR)
  vl = chart.to_dict()
  assert vl["mark"]["color"] == config.CONFIRMED_COLOR
  assert vl["title"] == "Confirmed"


def test_build_cases_geojson_colours_known_countries():
  data = build_cases_geojson(_geojson("Russia", "Italy", "Atlantis"), {"Russia": 100, "Italy": 400})
  by_name = {f["properties"]["name"]: f["properties"] for f in data["features"]}
  assert by_name["Russia"]["fill_color"] == [255, 255, 204, 200]
  assert by_name["Italy"]["fill_color"] == [128, 0, 38, 230]
  assert by_name["Italy"]["cases_label"] == "400"
  assert by_name["Atlantis"]["cases_total"] is None
  assert by_name["Atlantis"]["fill_color"] == config.MISSING_RGBA


def test_build_cases_geojson_leaves_input_untouched():
  source = _geojson("Italy")
  build_cases_geojson(source, {"Italy": 5})
  assert "fill_color" not in source["features"][0]["properties"]


def test_cases_deck():
  deck = cases_deck(build_cases_geojson(_geojson("Italy"), {"Italy": 5}))
  assert isinstance(deck, pdk.Deck)
