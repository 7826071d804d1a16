# Middleware package init
"""
NetDemo — Middleware Package
==============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    1. Request ID: correlation ID for logs and the X-Request-ID header
    2. Logging: one access line per request, tagged with that ID

    The order is reversed for responses, so the logged status is the one
    the exception handlers produced.
"""
