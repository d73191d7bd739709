# Streamlit dashboard for covid-19 case data

'''
  Widgets:
  - World distribution: headline totals, choropleth of total confirmed
    cases per country, sortable summary table.
  - By country: cumulative line charts (confirmed, active, recovered,
    deaths) or calendar heatmaps of daily new cases per year.

  Data comes from the public covid19api REST API; see covid_widgets.config
  for the environment variables that point it elsewhere.
'''
import logging

import altair as alt
import pandas as pd
import streamlit as st

from covid_widgets import api, config
from covid_widgets.charts import (
  LINE_COLORS,
  build_cases_geojson,
  calendar_heatmap,
  cases_deck,
  line_chart,
  series_frame,
)
from covid_widgets.countries import confirmed_by_country
from covid_widgets.logging_setup import setup_logging
from covid_widgets.normalizer import normalize, records_from_api
from covid_widgets.summary import (
  SUMMARY_COLUMNS,
  format_count,
  global_totals,
  latest_totals,
  sort_rows,
)

setup_logging(config.LOG_LEVEL)
logger = logging.getLogger("covid_dashboard")

st.set_page_config(layout="wide")

SECTION_TITLES = (
  "World distribution",
  "By country",
)
CALENDAR_VIEWS = (
  ("Confirmed", "confirmed_delta"),
  ("Recovered", "recovered_delta"),
  ("Deaths", "deaths_delta"),
)
CALENDAR_SCHEMES = {
  "confirmed_delta": "yelloworangered",
  "recovered_delta": "greens",
  "deaths_delta": "reds",
}


@st.cache_data(ttl=config.CACHE_TTL_SECONDS)
def load_summary() -> dict:
  return api.fetch_summary()


@st.cache_data(ttl=config.CACHE_TTL_SECONDS)
def load_world_geojson() -> dict:
  return api.fetch_world_geojson()


@st.cache_data(ttl=config.CACHE_TTL_SECONDS)
def load_country_options() -> list[tuple[str, str]]:
  return api.country_options(api.fetch_countries())


@st.cache_data(ttl=config.CACHE_TTL_SECONDS)
def load_country_totals(slug: str) -> list[dict]:
  return api.fetch_country_totals(slug)


@st.cache_data(ttl=config.CACHE_TTL_SECONDS)
def load_country_dayone(slug: str) -> list[dict]:
  return api.fetch_country_dayone(slug)


def render_totals(totals):
  cols = st.columns(4)
  values = (
    ("Confirmed", None if totals is None else totals.confirmed),
    ("Active", None if totals is None else totals.active),
    ("Recovered", None if totals is None else totals.recovered),
    ("Deaths", None if totals is None else totals.deaths),
  )
  for col, (label, value) in zip(cols, values):
    col.metric(label, format_count(value))


def render_world():
  st.title(SECTION_TITLES[0])
  summary = load_summary()
  countries = summary.get("Countries") or []
  if not countries:
    st.info("The summary endpoint returned no country data.")
    return

  render_totals(global_totals(summary))
  st.divider()

  map_mode = st.toggle("Map view", value=True)
  if map_mode:
    geojson = build_cases_geojson(load_world_geojson(), confirmed_by_country(summary))
    st.pydeck_chart(cases_deck(geojson))
    st.caption("Total confirmed cases; grey countries have no data.")
    return

  labels = dict(SUMMARY_COLUMNS)
  field_col, dir_col = st.columns((2, 1))
  sorted_by = field_col.selectbox(
    "Sort by", list(labels), format_func=labels.get, index=0,
  )
  direction = dir_col.radio("Direction", ("asc", "desc"), horizontal=True)
  rows = sort_rows(countries, sorted_by, direction)
  table = pd.DataFrame(rows, columns=list(labels)).rename(columns=labels)
  st.dataframe(table, use_container_width=True, hide_index=True)


def render_country():
  st.title(SECTION_TITLES[1])
  options = load_country_options()
  if not options:
    st.info("No countries available.")
    return

  labels = dict((slug, label) for label, slug in options)
  slug = st.selectbox("Country", list(labels), format_func=labels.get)
  calendar_mode = st.toggle("Calendar view", value=False)

  if calendar_mode:
    payload = load_country_dayone(slug)
    render_totals(latest_totals(payload))
    st.divider()
    groups, maxima = normalize(records_from_api(payload))
    if not groups:
      st.info(f"No daily data reported for {labels[slug]}.")
      return
    for title, fill_by in CALENDAR_VIEWS:
      st.subheader(f"Daily new {title.lower()}")
      chart = calendar_heatmap(
        groups,
        fill_by=fill_by,
        scheme=CALENDAR_SCHEMES[fill_by],
        max_scale=maxima.for_field(fill_by) or config.DEFAULT_MAX_SCALE,
      )
      st.altair_chart(chart, use_container_width=False)
    return

  payload = load_country_totals(slug)
  render_totals(latest_totals(payload))
  st.divider()
  if not payload:
    st.info(f"No totals reported for {labels[slug]}.")
    return
  charts = [
    line_chart(series_frame(payload, field), field, color)
    for field, color in LINE_COLORS.items()
  ]
  st.altair_chart(
    alt.vconcat(alt.hconcat(*charts[:2]), alt.hconcat(*charts[2:])),
    use_container_width=False,
  )


st.sidebar.title("Covid-19 Pandemic")
section_choice = st.sidebar.radio("Widgets", SECTION_TITLES, index=0)
try:
  if section_choice == SECTION_TITLES[0]:
    render_world()
  else:
    render_country()
except api.CovidApiError as exc:
  logger.warning("Rendering %s failed: %s", section_choice, exc)
  st.toast("Error loading covid data", icon="⚠️")
  st.error(f"{exc}. Please try again later.")
