"""
Service layer abstraction.

Services encapsulate the business logic for a domain.  The API
handlers only translate between HTTP and service calls, so the
in‑memory store used here could be replaced by a database without
changing the routes.
"""
