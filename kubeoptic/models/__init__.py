"""Pydantic and dataclass models: cluster resources, log buffer/search, settings."""
