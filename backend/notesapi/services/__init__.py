# Services package init
"""
Notes Backend - Services Layer
==============================

What:  Validation, sanitization and data access, independent of HTTP.

Service Inventory:
    - validation.validate_note: Field rules for title, text, datetime
    - sanitizer.sanitize: Escapes markup before storage
    - NoteService: create / read_all / read_one / update / delete
"""
