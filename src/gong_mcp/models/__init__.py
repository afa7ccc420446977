"""Gong API request and response contracts."""
