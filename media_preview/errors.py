from __future__ import annotations


class NotFoundServiceError(Exception):
    """Raised when the folder a discovery starts from cannot be listed."""
