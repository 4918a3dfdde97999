"""Parsing kernel: schema compilation and token scanning."""
