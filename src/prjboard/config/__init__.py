"""Configuration — section models, settings loading, and logging setup."""
