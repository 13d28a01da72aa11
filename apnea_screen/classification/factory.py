from apnea_screen.classification.client_base import BaseClassificationClient
from apnea_screen.classification.example_client_adapter import ExampleClassificationClient
from apnea_screen.classification.httpx_client_adapter import HttpxClassificationClient
from apnea_screen.config.settings import Settings


class ClassificationClientFactory:
    """Creates the configured inference service client."""

    PROVIDERS = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseClassificationClient:
        provider = settings.classification_provider.lower()
        if provider == "example":
            return ExampleClassificationClient()
        if provider == "http":
            return HttpxClassificationClient(
                base_url=settings.backend_url,
                timeout_seconds=settings.classification_timeout_seconds,
                probe_timeout_seconds=settings.probe_timeout_seconds,
            )
        raise ValueError(
            f"Unknown classification provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
