from dataclasses import dataclass, field


@dataclass(frozen=True)
class EcgSample:
    """One waveform sample; index is its position after filtering."""

    index: int
    value: float


@dataclass(frozen=True)
class UploadedFile:
    """The user's file exactly as selected: original name and raw bytes."""

    name: str
    content: bytes

    def text(self) -> str:
        """Decode as UTF-8 without a leading BOM; bad bytes become U+FFFD."""
        return self.content.decode("utf-8-sig", errors="replace")


@dataclass(frozen=True)
class PredictionResult:
    """Classification outcome shown to the user."""

    probability: float
    label: str
    message: str


@dataclass(frozen=True)
class EcgAnalysis:
    """Outcome of one upload: the local series and the remote prediction."""

    file_name: str
    series: list[EcgSample] = field(default_factory=list)
    prediction: PredictionResult | None = None
