"""Shared utilities: telemetry and cross-cutting helpers. No client logic."""
