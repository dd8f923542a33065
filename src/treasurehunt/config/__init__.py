"""Packaged configuration data (default_settings.yaml)."""
