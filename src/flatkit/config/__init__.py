"""Configuration — TOML section models, settings resolution, and logging."""
