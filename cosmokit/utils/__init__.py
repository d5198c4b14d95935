"""Utility helpers for cosmokit."""
