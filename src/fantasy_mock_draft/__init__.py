"""Deterministic fantasy-football mock-draft simulation."""
