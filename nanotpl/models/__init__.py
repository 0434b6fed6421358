"""Pydantic models shared across nanotpl."""
