"""Input actions with typed values, state transition events, observers and input bindings."""

__version__ = "0.16.0"

__all__ = ["value", "action", "events", "binding", "relationship"]