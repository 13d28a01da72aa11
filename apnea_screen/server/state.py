import threading
from enum import Enum


class ServerState(str, Enum):
    IDLE = "idle"
    WAKING = "waking"
    ONLINE = "online"


_ALLOWED_TRANSITIONS: dict[ServerState, ServerState] = {
    ServerState.IDLE: ServerState.WAKING,
    ServerState.WAKING: ServerState.ONLINE,
}


class ServerStatus:
    """Thread-safe cell holding the inference service's readiness.

    The state only moves forward: idle -> waking -> online.
    """

    def __init__(self, initial: ServerState = ServerState.IDLE) -> None:
        self._lock = threading.Lock()
        self._state = initial
        self._online = threading.Event()
        if initial is ServerState.ONLINE:
            self._online.set()

    @property
    def state(self) -> ServerState:
        with self._lock:
            return self._state

    def advance(self, expected: ServerState) -> bool:
        """Move from `expected` to its successor; False if the state differs."""
        with self._lock:
            if self._state is not expected or expected not in _ALLOWED_TRANSITIONS:
                return False
            self._state = _ALLOWED_TRANSITIONS[expected]
            if self._state is ServerState.ONLINE:
                self._online.set()
            return True

    def wait_online(self, timeout: float | None = None) -> bool:
        """Block until online or until the timeout elapses."""
        return self._online.wait(timeout)
