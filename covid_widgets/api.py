# covid_widgets/api.py
import logging

import requests

from covid_widgets import config

logger = logging.getLogger(__name__)

S = requests.Session()
S.headers.update({"Content-Type": "application/json"})


class CovidApiError(RuntimeError):
  """Raised when the case-data API or the geometry download fails."""


def _get(url: str):
  logger.debug("GET %s", url)
  try:
    r = S.get(url, timeout=config.API_TIMEOUT)
    r.raise_for_status()
    return r.json()
  except (requests.RequestException, ValueError) as exc:
    logger.error("Request to %s failed: %s", url, exc)
    raise CovidApiError(f"Could not load {url}") from exc


def fetch_countries() -> list[dict]:
  countries = _get(f"{config.API_BASE_URL}/countries")
  return sorted(countries, key=lambda c: c["Country"])


def fetch_country_dayone(slug: str) -> list[dict]:
  return _get(f"{config.API_BASE_URL}/country/{slug}")


def fetch_country_totals(slug: str) -> list[dict]:
  return _get(f"{config.API_BASE_URL}/total/country/{slug}")


def fetch_summary() -> dict:
  return _get(f"{config.API_BASE_URL}/summary")


def fetch_world_geojson() -> dict:
  return _get(config.WORLD_GEOJSON_URL)


def country_options(countries: list[dict]) -> list[tuple[str, str]]:
  return sorted((c["Country"], c["Slug"]) for c in countries)
