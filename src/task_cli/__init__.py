# src/task_cli/__init__.py

"""Personal task tracker driven by a line-oriented command loop."""

__version__ = "1.0.0"
