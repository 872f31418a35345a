import re

BLOOD_TYPES = ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-']

# Display order used by the landing page selector
DISPLAY_ORDER = ['A+', 'O+', 'B+', 'AB+', 'A-', 'O-', 'B-', 'AB-']

BLOOD_TYPE_INFO = {
    'A+': {
        'canGiveTo': ['A+', 'AB+'],
        'canReceiveFrom': ['A+', 'A-', 'O+', 'O-'],
        'percentage': 35.7,
        'facts': ['Most common blood type in India', 'Can receive from both A and O types'],
        'demand': 'Medium'
    },
    'O+': {
        'canGiveTo': ['O+', 'A+', 'B+', 'AB+'],
        'canReceiveFrom': ['O+', 'O-'],
        'percentage': 37.4,
        'facts': ['Universal donor for all positive blood types', 'Most versatile for donations'],
        'demand': 'High'
    },
    'B+': {
        'canGiveTo': ['B+', 'AB+'],
        'canReceiveFrom': ['B+', 'B-', 'O+', 'O-'],
        'percentage': 8.5,
        'facts': ['More common in Asian populations', 'Can donate to B+ and AB+ recipients'],
        'demand': 'Medium'
    },
    'AB+': {
        'canGiveTo': ['AB+'],
        'canReceiveFrom': ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-'],
        'percentage': 3.4,
        'facts': ['Universal recipient', 'Can receive blood from any type', 'Rarest positive blood type'],
        'demand': 'Low'
    },
    'A-': {
        'canGiveTo': ['A+', 'A-', 'AB+', 'AB-'],
        'canReceiveFrom': ['A-', 'O-'],
        'percentage': 6.3,
        'facts': ['Can donate to both A and AB types', 'Negative types are always in higher demand'],
        'demand': 'High'
    },
    'O-': {
        'canGiveTo': ['A+', 'A-', 'B+', 'B-', 'AB+', 'AB-', 'O+', 'O-'],
        'canReceiveFrom': ['O-'],
        'percentage': 6.6,
        'facts': ['Universal donor for all blood types', 'Most valuable blood type for emergencies', 'Always in critical demand'],
        'demand': 'High'
    },
    'B-': {
        'canGiveTo': ['B+', 'B-', 'AB+', 'AB-'],
        'canReceiveFrom': ['B-', 'O-'],
        'percentage': 1.5,
        'facts': ['Rare blood type', 'Can donate to both B and AB types'],
        'demand': 'High'
    },
    'AB-': {
        'canGiveTo': ['AB+', 'AB-'],
        'canReceiveFrom': ['A-', 'B-', 'AB-', 'O-'],
        'percentage': 0.6,
        'facts': ['Rarest of all blood types', 'Can receive from all negative types'],
        'demand': 'Medium'
    }
}


def canonical_blood_type(value):
    """Normalise user input such as ' ab+ ', 'O pos' or 'A-ve' to 'AB+', 'O+', 'A-'.

    Returns None when the value is not one of the eight ABO/Rh types.
    """
    if not isinstance(value, str):
        return None
    s = re.sub(r'\s+', '', value.upper())
    s = s.replace('POSITIVE', '+').replace('NEGATIVE', '-')
    s = s.replace('+VE', '+').replace('-VE', '-').replace('POS', '+').replace('NEG', '-')
    return s if s in BLOOD_TYPES else None


def blood_type_details(blood_type):
    canon = canonical_blood_type(blood_type)
    if canon is None:
        return None
    return dict(BLOOD_TYPE_INFO[canon], type=canon)


def all_blood_type_details():
    return [dict(BLOOD_TYPE_INFO[t], type=t) for t in DISPLAY_ORDER]
