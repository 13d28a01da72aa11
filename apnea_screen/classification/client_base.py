from abc import ABC, abstractmethod


class BaseClassificationClient(ABC):
    """Contract for transports that talk to the inference service."""

    @abstractmethod
    def predict(self, *, file_name: str, content: bytes) -> dict[str, object]:
        """Submit the unparsed upload and return the decoded JSON object.

        Raises:
            ClassificationNetworkError: on transport failure or timeout.
            ClassificationResponseError: on a non-success status, or a body
                that is not a JSON object.
        """

    @abstractmethod
    def probe(self) -> bool:
        """Return True when the service root answers with a success status.

        Raises:
            ClassificationNetworkError: when the service cannot be reached.
        """

    def close(self) -> None:
        """Release transport resources. Clients without any keep the no-op."""
