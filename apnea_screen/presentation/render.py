"""Plain-text cards for the CLI."""

from apnea_screen.classification.classifier import (
    APNEA_DETECTED,
    APNEA_LIKELY,
    ERROR_LABEL,
    NORMAL_PATTERN,
)
from apnea_screen.ecg.models import EcgSample, PredictionResult
from apnea_screen.risk.models import RiskLevel, RiskResult

BAR_WIDTH = 30

LABEL_TONES: dict[str, str] = {
    APNEA_DETECTED: "alert",
    APNEA_LIKELY: "warning",
    NORMAL_PATTERN: "ok",
    ERROR_LABEL: "alert",
}

LEVEL_TONES: dict[RiskLevel, str] = {
    RiskLevel.HIGH: "alert",
    RiskLevel.MODERATE: "warning",
    RiskLevel.LOW: "ok",
}

SERVICE_ALERT = (
    "Service Alert\n"
    "This app uses a free-tier backend which may be inactive.\n"
    "Start it once and continue browsing normally."
)


def label_tone(label: str) -> str:
    return LABEL_TONES.get(label, "neutral")


def confidence_bar(probability: float, width: int = BAR_WIDTH) -> str:
    filled = round(max(0.0, min(100.0, probability)) / 100 * width)
    return "[" + "#" * filled + "." * (width - filled) + "]"


def render_series(series: list[EcgSample]) -> str:
    if not series:
        return "No ECG data to display."
    values = [sample.value for sample in series]
    return (
        f"ECG waveform with {len(series)} data points "
        f"(min {min(values):.3f}, max {max(values):.3f})"
    )


def render_prediction(prediction: PredictionResult) -> str:
    return "\n".join([
        f"Analysis Results [{label_tone(prediction.label)}]",
        f"  Prediction: {prediction.label}",
        f"  Confidence: {confidence_bar(prediction.probability)} {prediction.probability:.1f}%",
        f"  {prediction.message}",
    ])


def render_risk(result: RiskResult) -> str:
    lines = [
        f"Risk Assessment Results [{LEVEL_TONES[result.level]}]",
        f"  Risk Level: {result.level.value}",
        f"  Risk Score: {result.score}",
        f"  BMI: {result.bmi:.1f}",
        f"  {result.message}",
        "  Next Steps:",
    ]
    lines.extend(f"    - {step}" for step in result.next_steps)
    return "\n".join(lines)
