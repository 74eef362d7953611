from league_manager.core.config import get_league_name, get_log_level
from league_manager.core.state import get_registry, init_registry

__all__ = [
    "get_league_name",
    "get_log_level",
    "get_registry",
    "init_registry",
]
