"""Cross-cutting configuration, error types, and logging setup."""
