"""Solutions and random input generators for classic online-judge problems."""

__version__ = "0.1.0"