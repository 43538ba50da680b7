"""Persistence models (db) and API payload models."""
