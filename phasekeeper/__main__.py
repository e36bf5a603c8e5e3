"""Allow ``python -m phasekeeper``."""

from .main import run

run()
