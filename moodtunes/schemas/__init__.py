"""Schemas — Pydantic response models for the API boundary."""
