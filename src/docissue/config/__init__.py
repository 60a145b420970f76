"""Configuration — docissue.toml discovery, settings, logging."""
