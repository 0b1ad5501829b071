"""Per-browser form controllers.

Each browser carries a ``coach_session`` cookie; this module keeps one
FormController per cookie value in an in-memory map so the form/result state
survives the Post/Redirect/Get round trip.

Design:
  * State is per-process; a restart returns every browser to an empty form.
  * Access is guarded by a Lock so threadpool handlers and the event loop
    never race on the map itself.
  * MAX_SESSIONS caps memory: the least recently used controller is dropped.
"""
from __future__ import annotations
from collections import OrderedDict
from threading import Lock
from typing import Optional
from uuid import uuid4

from coach.logic.controller.form_controller import FormController
from coach.utilities.config import MAX_SESSIONS

SESSION_COOKIE = "coach_session"

_lock = Lock()
_controllers: "OrderedDict[str, FormController]" = OrderedDict()


def new_session_id() -> str:
    return uuid4().hex


def get_controller(session_id: str, service) -> FormController:
    """Return the controller for session_id, creating it on first use."""
    with _lock:
        controller = _controllers.get(session_id)
        if controller is None:
            controller = FormController(service)
            _controllers[session_id] = controller
            if len(_controllers) > MAX_SESSIONS:
                _controllers.popitem(last=False)
        else:
            _controllers.move_to_end(session_id)
            controller.service = service
        return controller


def peek_controller(session_id: Optional[str]) -> Optional[FormController]:
    if not session_id:
        return None
    with _lock:
        return _controllers.get(session_id)


def clear() -> None:
    with _lock:
        _controllers.clear()


__all__ = ['SESSION_COOKIE', 'new_session_id', 'get_controller', 'peek_controller', 'clear']
