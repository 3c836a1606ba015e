"""
Campus Data Backend — Middleware Package
=========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    1. Request ID first, so every later log line can carry it
    2. Access log measures the full handler time and records the caller
       email that the current-user dependency leaves on request.state
"""
