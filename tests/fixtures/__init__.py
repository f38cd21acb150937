"""Reusable test fixtures for fargo."""
