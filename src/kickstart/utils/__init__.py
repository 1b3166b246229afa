"""Helper utilities for Kickstart."""
