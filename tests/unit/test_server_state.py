from apnea_screen.server.state import ServerState, ServerStatus


class TestServerStatus:
    def test_starts_idle(self) -> None:
        assert ServerStatus().state is ServerState.IDLE

    def test_advances_idle_to_waking_to_online(self) -> None:
        status = ServerStatus()
        assert status.advance(ServerState.IDLE)
        assert status.state is ServerState.WAKING
        assert status.advance(ServerState.WAKING)
        assert status.state is ServerState.ONLINE

    def test_rejects_stale_expectation(self) -> None:
        status = ServerStatus()
        status.advance(ServerState.IDLE)
        assert not status.advance(ServerState.IDLE)
        assert status.state is ServerState.WAKING

    def test_cannot_skip_waking(self) -> None:
        status = ServerStatus()
        assert not status.advance(ServerState.WAKING)
        assert status.state is ServerState.IDLE

    def test_online_is_terminal(self) -> None:
        status = ServerStatus(ServerState.ONLINE)
        assert not status.advance(ServerState.ONLINE)
        assert status.state is ServerState.ONLINE

    def test_wait_online_times_out_while_waking(self) -> None:
        status = ServerStatus()
        status.advance(ServerState.IDLE)
        assert status.wait_online(0.01) is False

    def test_wait_online_returns_once_online(self) -> None:
        status = ServerStatus()
        status.advance(ServerState.IDLE)
        status.advance(ServerState.WAKING)
        assert status.wait_online(0) is True

    def test_initially_online_needs_no_wait(self) -> None:
        assert ServerStatus(ServerState.ONLINE).wait_online(0) is True
