from .logging import LoggingHook

__all__ = ["LoggingHook"]
