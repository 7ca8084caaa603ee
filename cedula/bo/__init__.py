"""Bolivian identifiers."""
