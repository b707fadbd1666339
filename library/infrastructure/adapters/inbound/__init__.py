"""Inbound (driving) adapters."""
