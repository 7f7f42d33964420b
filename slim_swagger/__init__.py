"""Slim an OpenAPI/Swagger document down to a list of operations and the schemas they use."""

__version__ = "1.0.0"
