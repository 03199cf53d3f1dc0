"""Picker theme."""
