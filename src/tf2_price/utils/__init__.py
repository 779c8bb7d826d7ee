"""Stateless helpers shared by the currency value types."""
