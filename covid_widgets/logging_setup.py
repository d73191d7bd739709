"""Root logger setup for the dashboard process."""
import logging
import sys


def setup_logging(level: str = "INFO"):
  root = logging.getLogger()
  # streamlit re-executes app.py on every widget interaction
  if root.handlers:
    return
  root.setLevel(getattr(logging, level.upper(), logging.INFO))
  handler = logging.StreamHandler(sys.stdout)
  handler.setFormatter(
    logging.Formatter("%(asctime)s %(levelname)s %(name)s :: %(message)s")
  )
  root.addHandler(handler)
  logging.getLogger("covid_widgets").debug("Logging configured at %s", level.upper())
