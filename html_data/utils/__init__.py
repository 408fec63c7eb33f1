"""Utility helpers for html_data."""
