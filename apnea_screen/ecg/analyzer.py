import threading
from pathlib import Path

from apnea_screen.classification.classifier import Classifier
from apnea_screen.ecg.exceptions import AnalysisInProgressError
from apnea_screen.ecg.file_loader import FileLoader
from apnea_screen.ecg.models import EcgAnalysis, EcgSample, PredictionResult, UploadedFile
from apnea_screen.ecg.parser import count_skipped_rows, parse_ecg_text
from apnea_screen.logging.logger import Log


class EcgAnalyzer:
    """Runs one upload through local parsing and remote classification.

    Pipeline: decode -> parse -> classify. The series is built before the
    remote call and is never touched by its outcome.
    """

    def __init__(self, classifier: Classifier) -> None:
        self._classifier = classifier

    def analyze(self, upload: UploadedFile) -> EcgAnalysis:
        text = upload.text()
        series = parse_ecg_text(text)
        Log.info(f"Parsed {len(series)} samples from {upload.name}")
        skipped = count_skipped_rows(text)
        if skipped:
            Log.debug(f"Dropped {skipped} unparseable rows from {upload.name}")

        prediction = self._classifier.classify(upload)
        return EcgAnalysis(file_name=upload.name, series=series, prediction=prediction)


class EcgAnalysisSession:
    """State of the ECG analysis screen between user actions."""

    def __init__(self, analyzer: EcgAnalyzer, file_loader: FileLoader | None = None) -> None:
        self._analyzer = analyzer
        self._file_loader = file_loader or FileLoader()
        self._busy = threading.Lock()
        self.file_name = ""
        self.series: list[EcgSample] = []
        self.prediction: PredictionResult | None = None

    @property
    def is_loading(self) -> bool:
        return self._busy.locked()

    @property
    def has_content(self) -> bool:
        """Whether there is anything for a "clear all" action to remove."""
        return bool(self.file_name or self.series or self.prediction)

    def upload(self, path: Path) -> EcgAnalysis:
        """Load and analyze a file, replacing the previous analysis.

        Raises:
            AnalysisInProgressError: if another upload is still being analyzed.
            FileReadError: if the file cannot be read.
        """
        if not self._busy.acquire(blocking=False):
            raise AnalysisInProgressError(
                f"Still analyzing {self.file_name}; wait for it to finish"
            )
        try:
            upload = self._file_loader.load(path)
            self.file_name = upload.name
            self.prediction = None
            analysis = self._analyzer.analyze(upload)
            self.series = analysis.series
            self.prediction = analysis.prediction
            return analysis
        finally:
            self._busy.release()

    def clear(self) -> None:
        self.file_name = ""
        self.series = []
        self.prediction = None
