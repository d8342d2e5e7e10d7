"""Tessera - credential and bearer token service.

Issues and validates identity credentials for other services: users
register and log in to obtain signed access/refresh tokens, and protected
handlers accept requests only after the bearer token guard verified them.
"""

__version__ = "0.1.0"
