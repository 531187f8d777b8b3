"""
Notes Backend - Markup Sanitizer
================================

What:  Neutralizes HTML/script markup in user-supplied strings.
How:   Escapes &, < and > so stored values render as literal text.
       Quotes are left alone; values are never interpolated into attributes.
Who:   NoteService, on the write path only, after validation passes.

Example:
    sanitize("<script>x</script>") == "&lt;script&gt;x&lt;/script&gt;"
"""

import html


def sanitize(value: str) -> str:
    """Return `value` with markup characters escaped."""
    return html.escape(value, quote=False)
