"""Offline classification client.

Select it with CLASSIFICATION_PROVIDER=example for local development and
demos when the inference service is not available.
"""

from typing import ClassVar

from apnea_screen.classification.client_base import BaseClassificationClient


class ExampleClassificationClient(BaseClassificationClient):
    """Returns a fixed normal-pattern answer without any network calls."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "probability": 12.5,
        "status": "Normal ECG Pattern",
    }

    def predict(self, *, file_name: str, content: bytes) -> dict[str, object]:
        _ = file_name, content
        return dict(self.DEFAULT_RESPONSE)

    def probe(self) -> bool:
        return True
