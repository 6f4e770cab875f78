"""Structured telemetry output for rover runs."""
