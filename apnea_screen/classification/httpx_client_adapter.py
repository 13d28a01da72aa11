import httpx

from apnea_screen.classification.client_base import BaseClassificationClient
from apnea_screen.classification.exceptions import (
    ClassificationNetworkError,
    ClassificationResponseError,
)


class HttpxClassificationClient(BaseClassificationClient):
    """Inference service client over plain HTTP."""

    PREDICT_PATH = "/predict"
    PROBE_PATH = "/"
    UPLOAD_FIELD = "file"
    UPLOAD_CONTENT_TYPE = "text/csv"

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        probe_timeout_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )
        self._probe_timeout = (
            probe_timeout_seconds if probe_timeout_seconds is not None else timeout_seconds
        )

    def predict(self, *, file_name: str, content: bytes) -> dict[str, object]:
        files = {self.UPLOAD_FIELD: (file_name, content, self.UPLOAD_CONTENT_TYPE)}
        try:
            response = self._client.post(self.PREDICT_PATH, files=files)
        except httpx.HTTPError as exc:
            raise ClassificationNetworkError(
                f"Inference service network error: {exc}"
            ) from exc

        if not response.is_success:
            raise ClassificationResponseError(
                f"Inference service returned HTTP {response.status_code}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ClassificationResponseError(
                f"Inference service returned invalid JSON: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise ClassificationResponseError(
                f"Expected JSON object, got {type(payload).__name__}"
            )
        return payload

    def probe(self) -> bool:
        try:
            response = self._client.get(self.PROBE_PATH, timeout=self._probe_timeout)
        except httpx.HTTPError as exc:
            raise ClassificationNetworkError(
                f"Inference service unreachable: {exc}"
            ) from exc
        return response.is_success

    def close(self) -> None:
        self._client.close()
