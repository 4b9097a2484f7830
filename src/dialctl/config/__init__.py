"""Configuration — TOML sections, env vars, CLI flags, and logging setup."""
