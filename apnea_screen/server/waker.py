import threading
import time

from apnea_screen.classification.client_base import BaseClassificationClient
from apnea_screen.logging.logger import Log
from apnea_screen.server.session_store import SERVER_AWAKE_KEY, BaseSessionStore
from apnea_screen.server.state import ServerState, ServerStatus


class ServerWaker:
    """Wakes a possibly cold inference service: probe -> sleep -> retry until online.

    start() returns immediately; polling runs on a daemon thread, has no
    attempt limit and cannot be cancelled. Once a probe succeeds the session
    flag is written so later sessions skip the prompt and the polling.
    """

    def __init__(
        self,
        client: BaseClassificationClient,
        session_store: BaseSessionStore,
        poll_interval_seconds: float = 3.0,
    ) -> None:
        self._client = client
        self._session_store = session_store
        self._poll_interval = poll_interval_seconds
        initial = ServerState.ONLINE if self._is_marked_awake() else ServerState.IDLE
        self._status = ServerStatus(initial)
        self._thread: threading.Thread | None = None

    @property
    def state(self) -> ServerState:
        return self._status.state

    def needs_prompt(self) -> bool:
        """True when the user should be asked to start the service."""
        return not self._is_marked_awake() and self.state is ServerState.IDLE

    def start(self) -> bool:
        """Begin waking the service; False if it was already started or online."""
        if not self._status.advance(ServerState.IDLE):
            return False
        Log.info("Waking inference service")
        self._thread = threading.Thread(
            target=self._poll_until_online, name="server-waker", daemon=True
        )
        self._thread.start()
        return True

    def wait_until_online(self, timeout: float | None = None) -> bool:
        return self._status.wait_online(timeout)

    def _poll_until_online(self) -> None:
        attempts = 0
        while not self._probe():
            attempts += 1
            Log.debug(f"Inference service not ready (attempt {attempts}), sleeping")
            time.sleep(self._poll_interval)
        try:
            self._session_store.set(SERVER_AWAKE_KEY, "true")
        except OSError as exc:
            Log.warning(f"Could not persist session flag: {exc}")
        finally:
            self._status.advance(ServerState.WAKING)
        Log.info("Connected to inference service")

    def _probe(self) -> bool:
        """One probe. Any failure just means "not yet"."""
        try:
            return self._client.probe()
        except Exception as exc:
            Log.debug(f"Probe failed, will retry: {exc}")
            return False

    def _is_marked_awake(self) -> bool:
        return bool(self._session_store.get(SERVER_AWAKE_KEY))
