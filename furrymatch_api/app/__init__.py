"""
Application package.

Holds the API entrypoint and its layers: ``api`` (routes), ``services``
(business logic), ``repositories`` (SQL), ``schemas`` (payloads) and
``core`` (configuration, database, security, errors).
"""
