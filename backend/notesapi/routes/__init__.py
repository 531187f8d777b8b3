# Routes package init
"""
Notes Backend - API Routes Package
==================================

Route Inventory:
    - notes.py:   GET/POST   {prefix}/            (list, create)
                  GET/PUT/DELETE {prefix}/{id}    (read, replace, delete)
    - health.py:  GET        /health               (service health check)

Routes stay thin: read the request, call NoteService, pick the status code.
"""
