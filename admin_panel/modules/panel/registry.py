"""Thread-safe registry of operator_id -> UserManagementPanel."""
import threading
import logging
from admin_panel.modules.panel.controller import UserManagementPanel
from typing import Callable

logger = logging.getLogger(__name__)
_lock = threading.Lock()
_registry: dict[str, UserManagementPanel] = {}


def get_or_create(operator_id: str, factory: Callable[[], UserManagementPanel]) -> UserManagementPanel:
    with _lock:
        panel = _registry.get(operator_id)
        if panel is None:
            panel = factory()
            _registry[operator_id] = panel
            logger.debug(f"Created panel for operator {operator_id}")
        return panel


def discard(operator_id: str) -> bool:
    with _lock:
        panel = _registry.pop(operator_id, None)
    if panel is not None:
        logger.debug(f"Discarded panel for operator {operator_id}")
    return panel is not None


def clear() -> None:
    with _lock:
        _registry.clear()
