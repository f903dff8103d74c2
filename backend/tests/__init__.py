"""Orar backend tests."""
