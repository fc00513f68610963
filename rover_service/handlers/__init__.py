from .health_handler import HealthHandler
from .docs_handler import DocsHandler
from .move_handler import MoveHandler
from .state_handler import StateHandler

__all__ = [
    "HealthHandler",
    "DocsHandler",
    "MoveHandler",
    "StateHandler",
]
