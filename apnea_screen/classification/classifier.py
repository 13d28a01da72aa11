"""Submission of ECG uploads to the inference service.

Every failure is recovered here into a displayable "Error" result, so
callers always get a PredictionResult back.
"""

import math

from apnea_screen.classification.client_base import BaseClassificationClient
from apnea_screen.classification.exceptions import ClassificationError
from apnea_screen.ecg.models import PredictionResult, UploadedFile
from apnea_screen.logging.logger import Log

APNEA_DETECTED = "Sleep Apnea Detected"
APNEA_LIKELY = "Likely Apnea Condition"
NORMAL_PATTERN = "Normal ECG Pattern"
UNKNOWN_LABEL = "Unknown"
ERROR_LABEL = "Error"

LABEL_MESSAGES: dict[str, str] = {
    APNEA_DETECTED: (
        "High probability of sleep apnea detected. "
        "Please consult a healthcare professional."
    ),
    APNEA_LIKELY: (
        "Possible sleep apnea indicators found. "
        "Consider further medical evaluation."
    ),
}
NO_PATTERN_MESSAGE = "No significant sleep apnea patterns detected in the ECG data."
ERROR_MESSAGE = "Failed to analyze ECG data. Please try again or check the file format."


def message_for_label(label: str) -> str:
    """Advisory text for a label; unrecognized labels get the no-pattern message."""
    return LABEL_MESSAGES.get(label, NO_PATTERN_MESSAGE)


def error_result() -> PredictionResult:
    return PredictionResult(probability=0.0, label=ERROR_LABEL, message=ERROR_MESSAGE)


def _probability(value: object) -> float:
    # bool is an int subclass but never a probability
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if not math.isfinite(value):
        return 0.0
    return float(value)


def _label(value: object) -> str:
    if isinstance(value, str) and value:
        return value
    return UNKNOWN_LABEL


def build_prediction(payload: dict[str, object]) -> PredictionResult:
    """Map the service's JSON body onto a PredictionResult."""
    label = _label(payload.get("status"))
    return PredictionResult(
        probability=_probability(payload.get("probability")),
        label=label,
        message=message_for_label(label),
    )


class Classifier:
    """Sends uploads to the inference service and interprets the reply."""

    def __init__(self, client: BaseClassificationClient) -> None:
        self._client = client

    def classify(self, upload: UploadedFile) -> PredictionResult:
        Log.info(f"Submitting {upload.name} ({len(upload.content)} bytes) for classification")
        try:
            payload = self._client.predict(file_name=upload.name, content=upload.content)
        except ClassificationError as exc:
            Log.error(f"Classification of {upload.name} failed: {exc}")
            return error_result()
        except Exception:
            Log.exception(f"Unexpected error classifying {upload.name}")
            return error_result()

        result = build_prediction(payload)
        Log.info(
            f"Classification of {upload.name}: {result.label} ({result.probability:.1f}%)"
        )
        return result
