"""
API package containing the HTTP routes.

``router`` includes every domain router; ``deps`` provides the
dependencies handlers use to reach the store.
"""
