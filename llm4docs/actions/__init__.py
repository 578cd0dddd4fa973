from .ActionDispatcher import ActionDispatcher


__all__ = ["ActionDispatcher"]
