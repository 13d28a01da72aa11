"""Questionnaire-based sleep apnea risk score.

Every factor contributes independently; the age and BMI factors are
cascades with strict thresholds, so exactly one band of each applies.
Level bands include their lower bound: 4 is Moderate, 8 is High.
"""

from apnea_screen.risk.models import Gender, HealthProfile, RiskLevel, RiskResult

HIGH_RISK_MIN_SCORE = 8
MODERATE_RISK_MIN_SCORE = 4

# (exclusive lower bound, points), checked top-down
AGE_POINTS: tuple[tuple[int, int], ...] = ((50, 2), (40, 1))
BMI_POINTS: tuple[tuple[float, int], ...] = ((30.0, 3), (25.0, 2), (23.0, 1))

MALE_POINTS = 1
SNORING_POINTS = 2
TIRED_POINTS = 2
OBSERVED_APNEA_POINTS = 3
HIGH_BLOOD_PRESSURE_POINTS = 2

RISK_MESSAGES: dict[RiskLevel, str] = {
    RiskLevel.HIGH: (
        "High risk of sleep apnea detected. We strongly recommend consulting "
        "a sleep specialist for a comprehensive evaluation."
    ),
    RiskLevel.MODERATE: (
        "Moderate risk of sleep apnea. Consider discussing your symptoms with "
        "a healthcare provider for further assessment."
    ),
    RiskLevel.LOW: (
        "Low risk of sleep apnea based on the provided information. Maintain "
        "healthy sleep habits and monitor any changes in symptoms."
    ),
}

NEXT_STEPS: dict[RiskLevel, tuple[str, ...]] = {
    RiskLevel.HIGH: (
        "Schedule an appointment with a sleep specialist",
        "Consider a sleep study (polysomnography)",
        "Monitor your symptoms and keep a sleep diary",
    ),
    RiskLevel.MODERATE: (
        "Discuss your symptoms with your primary care physician",
        "Practice good sleep hygiene",
        "Consider lifestyle modifications (weight management, exercise)",
    ),
    RiskLevel.LOW: (
        "Maintain healthy sleep habits",
        "Stay physically active",
        "Monitor any changes in your sleep patterns",
    ),
}


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    height_m = height_cm / 100
    return weight_kg / (height_m ** 2)


def _banded_points(value: float, bands: tuple[tuple[float, int], ...]) -> int:
    for threshold, points in bands:
        if value > threshold:
            return points
    return 0


def calculate_score(profile: HealthProfile, bmi: float) -> int:
    score = _banded_points(profile.age, AGE_POINTS)
    if profile.gender is Gender.MALE:
        score += MALE_POINTS
    score += _banded_points(bmi, BMI_POINTS)
    if profile.snoring:
        score += SNORING_POINTS
    if profile.tired:
        score += TIRED_POINTS
    if profile.observed_apnea:
        score += OBSERVED_APNEA_POINTS
    if profile.high_blood_pressure:
        score += HIGH_BLOOD_PRESSURE_POINTS
    return score


def classify_score(score: int) -> RiskLevel:
    if score >= HIGH_RISK_MIN_SCORE:
        return RiskLevel.HIGH
    if score >= MODERATE_RISK_MIN_SCORE:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def calculate_risk(profile: HealthProfile) -> RiskResult:
    """Score a profile. Pure and deterministic."""
    bmi = calculate_bmi(profile.weight_kg, profile.height_cm)
    score = calculate_score(profile, bmi)
    level = classify_score(score)
    return RiskResult(
        score=score,
        level=level,
        bmi=bmi,
        message=RISK_MESSAGES[level],
        next_steps=NEXT_STEPS[level],
    )
