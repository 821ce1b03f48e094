"""Pydantic models for the HTTP layer."""
