import logging
from dataclasses import asdict, dataclass

from lifelink.services.blood_types import canonical_blood_type

logger = logging.getLogger(__name__)

URGENCY_LEVELS = {
    'low': 'Low - Within 24 hours',
    'normal': 'Normal - Within 6 hours',
    'high': 'High - Within 1 hour',
    'critical': 'Critical - Immediate',
}


@dataclass
class MatchedDonor:
    id: str
    name: str
    blood_type: str
    distance: float  # miles
    response_time: int  # minutes
    match_score: int  # percent

    def to_dict(self):
        data = asdict(self)
        return {
            'id': data['id'],
            'name': data['name'],
            'bloodType': data['blood_type'],
            'distance': data['distance'],
            'responseTime': data['response_time'],
            'matchScore': data['match_score'],
        }


# Demo roster: (id, name, distance, response time, match score)
DEMO_DONORS = [
    ('1', 'John D.', 2.4, 15, 98),
    ('2', 'Sarah M.', 3.7, 20, 92),
    ('3', 'Robert K.', 5.1, 25, 87),
    ('4', 'Emily L.', 6.8, 30, 82),
]


def normalise_urgency(urgency):
    level = (urgency or 'normal').strip().lower()
    if level not in URGENCY_LEVELS:
        raise ValueError(f'Invalid urgency level: {urgency}')
    return level


def find_matching_donors(blood_type, urgency='normal'):
    """Return demo candidates for a request, best match first."""
    canon = canonical_blood_type(blood_type)
    if canon is None:
        raise ValueError(f'Invalid blood type: {blood_type}')
    level = normalise_urgency(urgency)

    donors = [
        MatchedDonor(id=donor_id, name=name, blood_type=canon, distance=distance,
                     response_time=response_time, match_score=score)
        for donor_id, name, distance, response_time, score in DEMO_DONORS
    ]
    donors.sort(key=lambda d: d.match_score, reverse=True)
    logger.info('Matched %d donors for %s (%s urgency)', len(donors), canon, level)
    return donors


def get_demo_donor(donor_id, blood_type):
    for donor in find_matching_donors(blood_type):
        if donor.id == str(donor_id):
            return donor
    return None


def is_valid_hospital_key(api_key, min_length=6):
    return isinstance(api_key, str) and len(api_key.strip()) >= min_length


def notification_text(donor, blood_type, urgency='normal'):
    return (f"Hello {donor.name}, a hospital near you needs {blood_type} blood "
            f"({URGENCY_LEVELS[normalise_urgency(urgency)]}). Please respond if you can donate.")
