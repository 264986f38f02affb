"""
Service layer for business logic.

This layer keeps validation and error mapping out of the HTTP handlers
and away from the stores, so each can be tested on its own.
"""
