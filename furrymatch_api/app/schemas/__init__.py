"""
Pydantic schema definitions for API payloads.

Each entity defines a write model (request body of POST and PUT, with
an optional ``id``), a read model (response body, ``id`` always set)
and a patch model whose fields are all optional.  Schemas are separate
from the repositories so the API representation does not leak SQL
details.
"""
