"""
Service layer abstraction.

Each service encapsulates the store operations for a domain so that
API handlers never talk to the database driver directly.
"""
