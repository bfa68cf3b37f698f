"""Logging and settings for applications embedding fuzzydate."""
