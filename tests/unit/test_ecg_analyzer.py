import threading
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from apnea_screen.ecg.analyzer import EcgAnalysisSession, EcgAnalyzer
from apnea_screen.ecg.exceptions import AnalysisInProgressError, FileReadError
from apnea_screen.ecg.models import EcgSample, PredictionResult, UploadedFile

OK_PREDICTION = PredictionResult(probability=12.0, label="Normal ECG Pattern", message="fine")
ERROR_PREDICTION = PredictionResult(probability=0.0, label="Error", message="failed")


def _make_analyzer(prediction: PredictionResult = OK_PREDICTION) -> tuple[EcgAnalyzer, MagicMock]:
    classifier = MagicMock()
    classifier.classify.return_value = prediction
    return EcgAnalyzer(classifier), classifier


class TestEcgAnalyzer:
    def test_parses_and_classifies(self) -> None:
        analyzer, classifier = _make_analyzer()
        upload = UploadedFile(name="a.csv", content=b"ECG\n1.0\nabc\n2.5\n\n3.0")

        analysis = analyzer.analyze(upload)

        assert analysis.file_name == "a.csv"
        assert analysis.series == [EcgSample(0, 1.0), EcgSample(1, 2.5), EcgSample(2, 3.0)]
        assert analysis.prediction == OK_PREDICTION
        classifier.classify.assert_called_once_with(upload)

    def test_classification_error_keeps_series(self) -> None:
        analyzer, _ = _make_analyzer(ERROR_PREDICTION)
        analysis = analyzer.analyze(UploadedFile(name="a.csv", content=b"0.5\n0.6"))
        assert analysis.series == [EcgSample(0, 0.5), EcgSample(1, 0.6)]
        assert analysis.prediction == ERROR_PREDICTION

    def test_bom_prefixed_upload_keeps_first_sample(self) -> None:
        analyzer, _ = _make_analyzer()
        upload = UploadedFile(name="excel.csv", content="\ufeff0.5\n0.6".encode("utf-8"))
        analysis = analyzer.analyze(upload)
        assert analysis.series == [EcgSample(0, 0.5), EcgSample(1, 0.6)]

    def test_empty_file_still_submitted(self) -> None:
        analyzer, classifier = _make_analyzer()
        analysis = analyzer.analyze(UploadedFile(name="empty.csv", content=b""))
        assert analysis.series == []
        classifier.classify.assert_called_once()


class TestEcgAnalysisSession:
    def test_upload_stores_analysis(self, ecg_csv_file: Path) -> None:
        analyzer, _ = _make_analyzer()
        session = EcgAnalysisSession(analyzer)

        session.upload(ecg_csv_file)

        assert session.file_name == "recording.csv"
        assert len(session.series) == 3
        assert session.prediction == OK_PREDICTION
        assert session.has_content
        assert not session.is_loading

    def test_failed_classification_does_not_discard_series(self, ecg_csv_file: Path) -> None:
        analyzer, _ = _make_analyzer(ERROR_PREDICTION)
        session = EcgAnalysisSession(analyzer)
        session.upload(ecg_csv_file)
        assert [s.value for s in session.series] == [1.0, 2.5, 3.0]
        assert session.prediction == ERROR_PREDICTION

    def test_clear_resets_everything(self, ecg_csv_file: Path) -> None:
        analyzer, _ = _make_analyzer()
        session = EcgAnalysisSession(analyzer)
        session.upload(ecg_csv_file)

        session.clear()

        assert session.file_name == ""
        assert session.series == []
        assert session.prediction is None
        assert not session.has_content

    def test_rejects_upload_while_loading(self, ecg_csv_file: Path) -> None:
        started = threading.Event()
        release = threading.Event()
        classifier = MagicMock()

        def slow_classify(upload: UploadedFile) -> PredictionResult:
            started.set()
            release.wait(5)
            return OK_PREDICTION

        classifier.classify.side_effect = slow_classify
        session = EcgAnalysisSession(EcgAnalyzer(classifier))
        worker = threading.Thread(target=session.upload, args=(ecg_csv_file,))
        worker.start()
        try:
            assert started.wait(5)
            assert session.is_loading
            with pytest.raises(AnalysisInProgressError):
                session.upload(ecg_csv_file)
        finally:
            release.set()
            worker.join(5)
        assert not session.is_loading

    def test_missing_file_raises_and_releases(self, tmp_path: Path) -> None:
        analyzer, _ = _make_analyzer()
        session = EcgAnalysisSession(analyzer)
        with pytest.raises(FileReadError):
            session.upload(tmp_path / "nope.csv")
        assert not session.is_loading
