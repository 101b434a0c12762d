"""Packaged default configuration for npminit."""
