"""
Persistence layer.

One repository per table.  Repositories speak SQL and return schema
instances; services depend on them rather than opening connections
themselves.
"""
