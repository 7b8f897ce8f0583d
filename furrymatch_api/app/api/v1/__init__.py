"""
Version 1 of the API.

Bundles the entity resources and the account routes.  Breaking changes
belong in a new version subpackage.
"""
