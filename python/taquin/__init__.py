"""N×N sliding puzzle solver: graph search plus frame reduction."""

__version__ = "0.2.0"
