"""Packaged reference data (Bikram Sambat month lengths)."""
