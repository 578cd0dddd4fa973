from .DocumentHost import DocumentHost
from .InMemoryDocumentHost import InMemoryDocumentHost


__all__ = [
    "DocumentHost",
    "InMemoryDocumentHost",
]
