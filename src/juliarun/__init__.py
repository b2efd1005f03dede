"""Run Julia tests, docs and scripts in isolated project environments."""

__version__ = "0.1.0"
