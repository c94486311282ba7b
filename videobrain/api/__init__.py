"""Videobrain HTTP API."""
