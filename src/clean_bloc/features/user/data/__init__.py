"""Data layer: JSON models, remote data sources and repository implementations."""
