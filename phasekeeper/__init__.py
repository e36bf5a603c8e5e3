"""Phase Keeper - scorekeeping for Phase 10 style card games."""

__version__ = "0.1.0"
