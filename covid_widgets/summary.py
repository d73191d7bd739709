# covid_widgets/summary.py
from typing import NamedTuple, Optional


class Totals(NamedTuple):
  confirmed: int
  active: int
  recovered: int
  deaths: int


SUMMARY_COLUMNS = (
  ("Country", "Country"),
  ("NewConfirmed", "New Confirmed"),
  ("TotalConfirmed", "Total Confirmed"),
  ("NewRecovered", "New Recovered"),
  ("TotalRecovered", "Total Recovered"),
  ("NewDeaths", "New Deaths"),
  ("TotalDeaths", "Total Deaths"),
)


def global_totals(summary: dict) -> Totals:
  g = summary["Global"]
  return Totals(
    confirmed=g["TotalConfirmed"],
    active=g["TotalConfirmed"] - (g["TotalRecovered"] + g["TotalDeaths"]),
    recovered=g["TotalRecovered"],
    deaths=g["TotalDeaths"],
  )


def latest_totals(payload: list[dict]) -> Optional[Totals]:
  if not payload:
    return None
  last = payload[-1]
  return Totals(
    confirmed=last["Confirmed"],
    active=last.get("Active", 0),
    recovered=last["Recovered"],
    deaths=last["Deaths"],
  )


def format_count(value) -> str:
  if value is None:
    return "N/A"
  return f"{int(value):,}"


def sort_rows(rows: list[dict], field: str, direction: str = "asc") -> list[dict]:
  """Sort summary rows by one column; text compares case-insensitively."""
  def key(row):
    value = row.get(field)
    if isinstance(value, str):
      value = value.lower()
    # missing, zero and empty values sort first
    return (0, 0) if not value else (1, value)

  return sorted(rows, key=key, reverse=direction != "asc")
