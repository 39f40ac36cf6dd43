"""Upstream feed endpoints."""
