"""
Cross-cutting infrastructure: configuration, logging, database access,
security, error translation and response helpers.
"""
