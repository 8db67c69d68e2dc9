"""Shared configuration, schemas and collaborators for Astro Critics."""
