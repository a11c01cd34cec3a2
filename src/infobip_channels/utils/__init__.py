"""Utilitários transversais do SDK."""
