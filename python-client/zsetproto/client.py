import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Caller(Protocol):
    """Anything that can send one command and return the server's reply."""

    def call(self, command, *args): ...


_global_client = None

def Use(caller: Caller) -> Caller:
    """Installs the process-wide collaborator that commands are sent through."""
    global _global_client
    if not callable(getattr(caller, "call", None)):
        raise TypeError(f"{type(caller).__name__} has no call() method")
    _global_client = caller
    logger.debug("Installed caller %s", type(caller).__name__)
    return caller

def Release():
    """Drops the installed collaborator and returns it."""
    global _global_client
    previous, _global_client = _global_client, None
    return previous

def get_client() -> Caller:
    if _global_client is None:
        raise RuntimeError("Client not connected. Call Use() first.")
    return _global_client
