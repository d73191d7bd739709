"""
Cumulative-to-daily normalization for calendar heatmaps.

The API reports running totals per day. The calendar widget needs the
per-day increment, grouped by calendar year, and the largest increment per
category to scale its colour domain.

Input order and monotonic totals are preconditions: records are consumed as
given, and a decreasing total simply produces a negative delta.
"""
from dataclasses import dataclass
from datetime import date
from typing import Iterable, NamedTuple

import pandas as pd


@dataclass(frozen=True)
class CumulativeRecord:
  date: date
  confirmed: int
  recovered: int
  deaths: int
  active: int = 0
  country: str = ""


@dataclass(frozen=True)
class DeltaRecord:
  date: date
  confirmed: int
  recovered: int
  deaths: int
  active: int
  country: str
  confirmed_delta: int
  recovered_delta: int
  deaths_delta: int
  year: int


class YearGroup(NamedTuple):
  year: int
  records: list


@dataclass(frozen=True)
class RunningMaxima:
  confirmed_delta_max: int = 0
  recovered_delta_max: int = 0
  deaths_delta_max: int = 0

  def for_field(self, fill_by: str) -> int:
    return getattr(self, f"{fill_by}_max")


def normalize(records: Iterable[CumulativeRecord]) -> tuple[list[YearGroup], RunningMaxima]:
  """Turn cumulative daily totals into per-year lists of daily deltas.

  The first record is measured against zero. Groups come back in the order
  their year first appears; maxima span the whole input, not each year.
  """
  prev_confirmed = prev_recovered = prev_deaths = 0
  confirmed_max = recovered_max = deaths_max = 0
  by_year: dict[int, list[DeltaRecord]] = {}

  for rec in records:
    confirmed_delta = rec.confirmed - prev_confirmed
    recovered_delta = rec.recovered - prev_recovered
    deaths_delta = rec.deaths - prev_deaths
    prev_confirmed, prev_recovered, prev_deaths = rec.confirmed, rec.recovered, rec.deaths

    delta = DeltaRecord(
      date=rec.date,
      confirmed=rec.confirmed,
      recovered=rec.recovered,
      deaths=rec.deaths,
      active=rec.active,
      country=rec.country,
      confirmed_delta=confirmed_delta,
      recovered_delta=recovered_delta,
      deaths_delta=deaths_delta,
      year=rec.date.year,
    )

    if confirmed_delta > confirmed_max:
      confirmed_max = confirmed_delta
    if recovered_delta > recovered_max:
      recovered_max = recovered_delta
    if deaths_delta > deaths_max:
      deaths_max = deaths_delta

    if delta.year not in by_year:
      by_year[delta.year] = []
    by_year[delta.year].append(delta)

  groups = [YearGroup(year, values) for year, values in by_year.items()]
  return groups, RunningMaxima(confirmed_max, recovered_max, deaths_max)


def parse_api_date(raw: str) -> date:
  ts = pd.Timestamp(raw)
  if ts.tzinfo is not None:
    ts = ts.tz_convert("UTC")
  return ts.date()


def records_from_api(payload: list[dict]) -> list[CumulativeRecord]:
  """Decode the per-day objects of a country series, keeping their order."""
  return [
    CumulativeRecord(
      date=parse_api_date(item["Date"]),
      confirmed=int(item["Confirmed"]),
      recovered=int(item["Recovered"]),
      deaths=int(item["Deaths"]),
      active=int(item.get("Active") or 0),
      country=item.get("Country") or "",
    )
    for item in payload
  ]


def groups_to_frame(groups: list[YearGroup]) -> pd.DataFrame:
  rows = [vars(rec) for _, values in groups for rec in values]
  columns = list(DeltaRecord.__dataclass_fields__)
  frame = pd.DataFrame(rows, columns=columns)
  frame["date"] = pd.to_datetime(frame["date"])
  return frame
