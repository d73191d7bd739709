# covid_widgets/countries.py
# The summary endpoint and the world GeoJSON disagree on a handful of country
# names; the map join goes through this table.

RENAMED_COUNTRIES = {
  "Bahamas": "The Bahamas",
  "Brunei Darussalam": "Brunei",
  "Congo (Brazzaville)": "Republic of the Congo",
  "Congo (Kinshasa)": "Democratic Republic of the Congo",
  "Côte d'Ivoire": "Ivory Coast",
  "Guinea-Bissau": "Guinea Bissau",
  "Holy See (Vatican City State)": "Vatican",
  "Iran, Islamic Republic of": "Iran",
  "Korea (South)": "South Korea",
  "Lao PDR": "Laos",
  "Macedonia, Republic of": "Macedonia",
  "Palestinian Territory": "West Bank",
  "Republic of Kosovo": "Kosovo",
  "Russian Federation": "Russia",
  "Serbia": "Republic of Serbia",
  "Syrian Arab Republic (Syria)": "Syria",
  "Taiwan, Republic of China": "Taiwan",
  "Tanzania, United Republic of": "United Republic of Tanzania",
  "Timor-Leste": "East Timor",
  "Venezuela (Bolivarian Republic)": "Venezuela",
  "Viet Nam": "Vietnam",
}


def normalize_country_name(name: str) -> str:
  return RENAMED_COUNTRIES.get(name, name)


def confirmed_by_country(summary: dict) -> dict[str, int]:
  return {
    normalize_country_name(country["Country"]): country["TotalConfirmed"]
    for country in summary.get("Countries", [])
  }
