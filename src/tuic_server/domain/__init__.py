"""
Domain layer package.

Contains pure data models and the option schema, with no I/O dependencies.
"""
