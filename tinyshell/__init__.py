"""Two minimal interactive shells and small pwd, echo, cp and mv utilities."""

__version__ = "0.1.0"