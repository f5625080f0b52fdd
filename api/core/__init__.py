"""
Building blocks shared by the auth, bikes and contact packages: settings read
once at startup, the asyncpg pool, the error taxonomy with its JSON handlers,
and raw request body parsing.
"""
