"""Configuration loading, paths, and derived settings."""
