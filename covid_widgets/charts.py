# covid_widgets/charts.py
import copy
import logging

import altair as alt
import numpy as np
import pandas as pd
import pydeck as pdk

from covid_widgets import config
from covid_widgets.normalizer import YearGroup, groups_to_frame, parse_api_date

logger = logging.getLogger(__name__)

LINE_COLORS = {
  "Confirmed": config.CONFIRMED_COLOR,
  "Active": config.ACTIVE_COLOR,
  "Recovered": config.RECOVERED_COLOR,
  "Deaths": config.DEATHS_COLOR,
}
WEEKDAY_LABELS = "SMTWTFS"
# a year spans at most 54 Sunday-start weeks
WEEK_DOMAIN = list(range(54))
WEEKDAY_DOMAIN = list(range(7))
LOW_RGBA = np.array([255, 255, 204, 200])
HIGH_RGBA = np.array([128, 0, 38, 230])


def calendar_frame(groups: list[YearGroup], fill_by: str = config.DEFAULT_FILL_BY) -> pd.DataFrame:
  df = groups_to_frame(groups)
  out = pd.DataFrame({
    'date': df['date'],
    'year': df['year'],
    'value': df[fill_by],
  })
  # Sunday-start weeks counted from January 1st of the same year
  weekday = (out['date'].dt.dayofweek + 1) % 7
  jan1 = pd.to_datetime(out['year'].astype(str) + '-01-01')
  jan1_weekday = (jan1.dt.dayofweek + 1) % 7
  out['weekday'] = weekday.astype(int)
  out['week'] = ((out['date'].dt.dayofyear - 1 + jan1_weekday) // 7).astype(int)
  return out


def calendar_heatmap(
  groups: list[YearGroup],
  fill_by: str = config.DEFAULT_FILL_BY,
  scheme: str = config.DEFAULT_COLOR_SCHEME,
  max_scale: int = config.DEFAULT_MAX_SCALE,
) -> alt.FacetChart:
  frame = calendar_frame(groups, fill_by)
  year_order = [g.year for g in groups]
  cell = config.CALENDAR_CELL_SIZE
  return (
    alt.Chart(frame)
    .mark_rect(stroke='white', strokeWidth=1)
    .encode(
      x=alt.X('week:O', title=None, axis=None, scale=alt.Scale(domain=WEEK_DOMAIN)),
      y=alt.Y(
        'weekday:O',
        scale=alt.Scale(domain=WEEKDAY_DOMAIN),
        title=None,
        axis=alt.Axis(labelExpr=f"'{WEEKDAY_LABELS}'[datum.value]", ticks=False, domain=False),
      ),
      color=alt.Color(
        'value:Q',
        title='Cases',
        scale=alt.Scale(scheme=scheme, domain=[0, max(max_scale, 1)], clamp=True),
      ),
      tooltip=[
        alt.Tooltip('date:T', title='Date', format='%a %b %d %Y'),
        alt.Tooltip('value:Q', title='Cases', format=','),
      ],
    )
    .properties(width=len(WEEK_DOMAIN) * cell, height=len(WEEKDAY_DOMAIN) * cell)
    .facet(row=alt.Row('year:O', title=None, sort=year_order))
  )


def series_frame(payload: list[dict], field: str) -> pd.DataFrame:
  return pd.DataFrame({
    'date': pd.to_datetime([parse_api_date(item['Date']) for item in payload]),
    'value': pd.to_numeric([item.get(field) for item in payload], errors='coerce'),
  })


def line_chart(frame: pd.DataFrame, title: str, color: str) -> alt.Chart:
  return (
    alt.Chart(frame)
    .mark_line(color=color, strokeWidth=2, strokeJoin='round', strokeCap='round')
    .encode(
      x=alt.X('date:T', title=None),
      y=alt.Y('value:Q', title=title, scale=alt.Scale(nice=True)),
      tooltip=[
        alt.Tooltip('date:T', title='Date', format='%Y-%m-%d'),
        alt.Tooltip('value:Q', title=title, format=','),
      ],
    )
    .properties(height=config.LINE_CHART_HEIGHT, width=config.LINE_CHART_WIDTH, title=title)
  )


def build_cases_geojson(geojson: dict, confirmed: dict[str, int]) -> dict:
  """Colour each country feature by total confirmed cases (square-root scale)."""
  data = copy.deepcopy(geojson)
  values = [v for v in confirmed.values() if v is not None]
  low = np.sqrt(min(values)) if values else 0
  high = np.sqrt(max(values)) if values else 0
  span = high - low

  matched = 0
  for feature in data.get('features', []):
    name = feature['properties'].get('name')
    total = confirmed.get(name)
    if total is None:
      feature['properties']['cases_total'] = None
      feature['properties']['cases_label'] = "N/A"
      feature['properties']['fill_color'] = config.MISSING_RGBA
      continue

    intensity = (np.sqrt(total) - low) / span if span > 0 else 0
    color = (LOW_RGBA + (HIGH_RGBA - LOW_RGBA) * intensity).astype(int).tolist()
    feature['properties']['cases_total'] = int(total)
    feature['properties']['cases_label'] = f"{int(total):,}"
    feature['properties']['fill_color'] = color
    matched += 1

  logger.info("Coloured %d of %d map features", matched, len(data.get('features', [])))
  return data


def cases_deck(geojson: dict) -> pdk.Deck:
  layer = pdk.Layer(
    "GeoJsonLayer",
    data=geojson,
    pickable=True,
    stroked=True,
    get_line_color=[255, 255, 255],
    get_fill_color='properties.fill_color',
    auto_highlight=True,
  )
  return pdk.Deck(
    layers=[layer],
    initial_view_state=pdk.ViewState(latitude=10, longitude=0, zoom=0.8),
    map_style=None,
    tooltip={
      "html": "<b>{name}</b><br/>Total confirmed: {cases_label}",
      "style": {"color": "white"},
    },
  )
