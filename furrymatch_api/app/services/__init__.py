"""
Service layer.

Services hold the business logic of each entity and reach storage only
through the repository handed to their constructor.  Routes obtain
service instances through the providers in ``api.deps``.
"""
