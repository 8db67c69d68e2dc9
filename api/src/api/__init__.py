"""Astro Critics HTTP API."""
