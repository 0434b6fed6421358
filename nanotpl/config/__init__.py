"""Ambient settings and engine defaults."""
