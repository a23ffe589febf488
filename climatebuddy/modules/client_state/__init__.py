from .store import ClientStateKeyError, ClientStateStore, StateKey

__all__ = ["ClientStateKeyError", "ClientStateStore", "StateKey"]
