# tests/conftest.py
from datetime import date

import pytest

from covid_widgets.normalizer import CumulativeRecord


def _record(day: str, confirmed: int, recovered: int = 0, deaths: int = 0) -> CumulativeRecord:
  return CumulativeRecord(
    date=date.fromisoformat(day), confirmed=confirmed, recovered=recovered, deaths=deaths,
  )


@pytest.fixture
def rec():
  return _record


@pytest.fixture
def three_years():
  return [
    _record("2020-12-30", 10, 1, 0),
    _record("2020-12-31", 15, 3, 1),
    _record("2021-01-01", 40, 3, 2),
    _record("2021-06-01", 100, 50, 4),
    _record("2022-01-01", 120, 60, 4),
  ]


@pytest.fixture
def country_payload():
  return [
    {"Country": "Italy", "Date": "2020-03-01T00:00:00Z",
     "Confirmed": 1694, "Recovered": 83, "Deaths": 34, "Active": 1577},
    {"Country": "Italy", "Date": "2020-03-02T00:00:00Z",
     "Confirmed": 2036, "Recovered": 149, "Deaths": 52, "Active": 1835},
    {"Country": "Italy", "Date": "2020-03-03T00:00:00Z",
     "Confirmed": 2502, "Recovered": 160, "Deaths": 79, "Active": 2263},
  ]


@pytest.fixture
def summary_payload():
  return {
    "Global": {"TotalConfirmed": 1000, "TotalRecovered": 300, "TotalDeaths": 50},
    "Countries": [
      {"Country": "Russian Federation", "Slug": "russia",
       "NewConfirmed": 5, "TotalConfirmed": 400, "NewRecovered": 1,
       "TotalRecovered": 100, "NewDeaths": 0, "TotalDeaths": 10},
      {"Country": "Italy", "Slug": "italy",
       "NewConfirmed": 10, "TotalConfirmed": 500, "NewRecovered": 2,
       "TotalRecovered": 150, "NewDeaths": 1, "TotalDeaths": 30},
      {"Country": "andorra", "Slug": "andorra",
       "NewConfirmed": 0, "TotalConfirmed": 100, "NewRecovered": 0,
       "TotalRecovered": 50, "NewDeaths": 0, "TotalDeaths": 10},
    ],
  }
