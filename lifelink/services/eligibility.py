import re
from dataclasses import asdict, dataclass

ELIGIBLE = 'Eligible'
CONDITIONALLY_ELIGIBLE = 'Conditionally Eligible'
NOT_ELIGIBLE = 'Not Eligible'

_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')
_TRUTHY = {'1', 'true', 'yes', 'on', 'y'}

_VERDICT_TEXT = {
    ELIGIBLE: (
        'You are eligible to donate!',
        'Thank you for registering! Your information has been saved and you will be notified '
        'when donation opportunities arise in your area.'
    ),
    CONDITIONALLY_ELIGIBLE: (
        'You may be eligible with additional screening',
        'You may be eligible to donate with additional medical screening. Please contact your '
        'local donation center for more information.'
    ),
    NOT_ELIGIBLE: (
        'You are not eligible at this time',
        'Based on the information provided, you are not eligible to donate at this time. '
        'Please check back after 14 days or when your health status changes.'
    ),
}


@dataclass
class EligibilityResult:
    score: int
    verdict: str
    title: str
    message: str

    @property
    def eligible(self):
        return self.verdict != NOT_ELIGIBLE

    def to_dict(self):
        data = asdict(self)
        data['eligible'] = self.eligible
        return data


def coerce_int(value):
    """Leading-integer parse; returns None for anything without leading digits."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value == value and abs(value) != float('inf') else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return int(match.group(1)) if match else None
    return None


def coerce_flag(value):
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def age_points(age):
    age = coerce_int(age)
    if age is None:
        return 0
    if 18 <= age <= 65:
        return 40
    if 65 < age <= 75:
        return 20
    return 0


def weight_points(weight):
    weight = coerce_int(weight)
    if weight is None:
        return 0
    if weight >= 50:
        return 30
    if weight >= 45:
        return 15
    return 0


def illness_points(recent_illness):
    return 0 if coerce_flag(recent_illness) else 30


def score_eligibility(age, weight, recent_illness):
    return age_points(age) + weight_points(weight) + illness_points(recent_illness)


def eligibility_verdict(score):
    if score >= 70:
        return ELIGIBLE
    if score >= 50:
        return CONDITIONALLY_ELIGIBLE
    return NOT_ELIGIBLE


def assess(age, weight, recent_illness):
    score = score_eligibility(age, weight, recent_illness)
    verdict = eligibility_verdict(score)
    title, message = _VERDICT_TEXT[verdict]
    return EligibilityResult(score=score, verdict=verdict, title=title, message=message)
