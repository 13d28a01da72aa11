from collections.abc import Callable
from pathlib import Path

import httpx
import pytest


@pytest.fixture()
def ecg_csv_text() -> str:
    """Header, a malformed row and a blank line among three valid samples."""
    return "ECG\n1.0\nabc\n2.5\n\n3.0"


@pytest.fixture()
def ecg_csv_file(tmp_path: Path, ecg_csv_text: str) -> Path:
    path = tmp_path / "recording.csv"
    path.write_text(ecg_csv_text, encoding="utf-8")
    return path


@pytest.fixture()
def mock_transport_factory() -> Callable[..., httpx.MockTransport]:
    """Build an httpx MockTransport answering /predict and / from fixed values."""

    def build(
        *,
        predict_status: int = 200,
        predict_json: object = None,
        predict_body: bytes | None = None,
        probe_statuses: list[int] | None = None,
        requests: list[httpx.Request] | None = None,
    ) -> httpx.MockTransport:
        probe_queue = list(probe_statuses or [200])

        def handler(request: httpx.Request) -> httpx.Response:
            if requests is not None:
                requests.append(request)
            if request.url.path == "/predict":
                if predict_body is not None:
                    return httpx.Response(predict_status, content=predict_body)
                return httpx.Response(predict_status, json=predict_json)
            status = probe_queue.pop(0) if len(probe_queue) > 1 else probe_queue[0]
            return httpx.Response(status, text="ok")

        return httpx.MockTransport(handler)

    return build
