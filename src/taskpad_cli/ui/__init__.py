"""Rendering and UI adapters."""
