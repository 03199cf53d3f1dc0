"""Picker widgets."""
