"""Calculators that turn loaded tickets into metrics, summaries and rollups."""
