# Middleware package init
"""
Notes Backend - Middleware Package
==================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [GZip] → [CORS] → Route Handler

    - Request ID runs first so the access log line carries it
    - Access Log sees the final status code and total duration
"""
