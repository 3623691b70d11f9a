"""Material colour roles, colour-string filters, template rendering and configuration."""

__version__ = "0.1.0"