"""Core infrastructure: configuration, logging, storage and errors."""
