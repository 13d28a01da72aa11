from apnea_screen.ecg.models import EcgSample, PredictionResult
from apnea_screen.presentation.render import (
    confidence_bar,
    label_tone,
    render_prediction,
    render_risk,
    render_series,
)
from apnea_screen.risk.models import RiskLevel, RiskResult


class TestRenderSeries:
    def test_empty_series_means_nothing_to_show(self) -> None:
        assert render_series([]) == "No ECG data to display."

    def test_summarizes_points(self) -> None:
        text = render_series([EcgSample(0, -0.5), EcgSample(1, 1.25)])
        assert text == "ECG waveform with 2 data points (min -0.500, max 1.250)"


class TestRenderPrediction:
    def test_shows_label_confidence_and_message(self) -> None:
        text = render_prediction(
            PredictionResult(probability=87.54, label="Sleep Apnea Detected", message="See a doctor.")
        )
        assert "[alert]" in text
        assert "Prediction: Sleep Apnea Detected" in text
        assert "87.5%" in text
        assert text.endswith("See a doctor.")


class TestConfidenceBar:
    def test_full_and_empty(self) -> None:
        assert confidence_bar(100, width=4) == "[####]"
        assert confidence_bar(0, width=4) == "[....]"

    def test_clamps_out_of_range(self) -> None:
        assert confidence_bar(250, width=4) == "[####]"
        assert confidence_bar(-3, width=4) == "[....]"


class TestLabelTone:
    def test_known_labels(self) -> None:
        assert label_tone("Likely Apnea Condition") == "warning"
        assert label_tone("Normal ECG Pattern") == "ok"
        assert label_tone("Error") == "alert"

    def test_unknown_label_is_neutral(self) -> None:
        assert label_tone("Unknown") == "neutral"


class TestRenderRisk:
    def test_shows_score_bmi_and_steps(self) -> None:
        result = RiskResult(
            score=5,
            level=RiskLevel.MODERATE,
            bmi=24.2214,
            message="Moderate risk.",
            next_steps=("one", "two", "three"),
        )
        text = render_risk(result)
        assert "[warning]" in text
        assert "Risk Level: Moderate" in text
        assert "Risk Score: 5" in text
        assert "BMI: 24.2" in text
        assert text.splitlines()[-3:] == ["    - one", "    - two", "    - three"]
