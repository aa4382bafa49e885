"""Monitoring configuration."""
