"""Domain layer for quickquote application.

Service classes live in their own modules (``quickquote.domain.quote`` and
friends) and are imported from there; this package stays free of imports so
the storage layer can load ``quickquote.domain.entities`` without pulling in
the services.
"""

__all__: list[str] = []
