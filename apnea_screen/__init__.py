"""Sleep apnea screening: ECG upload classification and questionnaire risk scoring."""

__version__ = "0.1.0"
