"""
Application package initializer.

This package contains the main entrypoint for the car API and its
submodules: ``core`` (configuration, logging, storage and errors),
``schemas`` (Pydantic payloads), ``services`` (store operations) and
``api`` (routers).
"""

from .main import app, create_app  # noqa: F401
