import re

from lifelink.services.blood_types import BLOOD_TYPES

HOSPITAL_BLOOD_INVENTORY = {
    'Memorial Hospital': {
        'A+': {'units': 45, 'demand': 'high'},
        'A-': {'units': 12, 'demand': 'medium'},
        'B+': {'units': 23, 'demand': 'low'},
        'B-': {'units': 8, 'demand': 'high'},
        'AB+': {'units': 5, 'demand': 'low'},
        'AB-': {'units': 3, 'demand': 'critical'},
        'O+': {'units': 67, 'demand': 'medium'},
        'O-': {'units': 15, 'demand': 'critical'},
    },
    'City General Hospital': {
        'A+': {'units': 32, 'demand': 'medium'},
        'A-': {'units': 9, 'demand': 'high'},
        'B+': {'units': 18, 'demand': 'medium'},
        'B-': {'units': 5, 'demand': 'critical'},
        'AB+': {'units': 7, 'demand': 'low'},
        'AB-': {'units': 2, 'demand': 'critical'},
        'O+': {'units': 41, 'demand': 'high'},
        'O-': {'units': 11, 'demand': 'critical'},
    },
    'University Medical Center': {
        'A+': {'units': 58, 'demand': 'low'},
        'A-': {'units': 17, 'demand': 'medium'},
        'B+': {'units': 29, 'demand': 'low'},
        'B-': {'units': 10, 'demand': 'high'},
        'AB+': {'units': 12, 'demand': 'low'},
        'AB-': {'units': 4, 'demand': 'high'},
        'O+': {'units': 73, 'demand': 'medium'},
        'O-': {'units': 21, 'demand': 'high'},
    },
}

BLOOD_TYPE_KEYWORDS = ('blood type', 'blood group')
HOSPITAL_KEYWORDS = ('hospital', 'center', 'clinic')
PROCESS_KEYWORDS = ('donate', 'donation', 'process')
ELIGIBILITY_KEYWORDS = ('eligible', 'eligibility', 'can i donate')

PROCESS_REPLY = (
    "The donation process is simple and takes about an hour. After registration and a quick "
    "health check, the actual donation takes only 8-10 minutes. Would you like to know more "
    "about eligibility or schedule a donation?"
)
ELIGIBILITY_REPLY = (
    "Eligibility depends on several factors including age (17+), weight (110+ lbs), health "
    "status, and time since last donation (56 days for whole blood). Would you like me to "
    "check your specific eligibility?"
)
DEFAULT_REPLY = (
    "I'm your LifeLink AI assistant. I can help with information about blood donation, "
    "eligibility, finding donation centers, or checking blood type compatibility. How can I "
    "assist you today?"
)

URGENT_DEMAND = ('critical', 'high')


def _mentions(text, keywords):
    return any(keyword in text for keyword in keywords)


def _blood_type_pattern(blood_type):
    group = blood_type[:-1].lower()
    sign, word = ('\\+', 'positive') if blood_type.endswith('+') else ('-', 'negative')
    # "a+" or "apositive"; a letter right before the group means another word or AB
    return re.compile(rf'(?<![a-z]){group}(?:{sign}|{word})')


BLOOD_TYPE_PATTERNS = [(blood_type, _blood_type_pattern(blood_type)) for blood_type in BLOOD_TYPES]


def find_blood_type(text):
    for blood_type, pattern in BLOOD_TYPE_PATTERNS:
        if pattern.search(text):
            return blood_type
    return None


def find_hospital(text):
    for name in HOSPITAL_BLOOD_INVENTORY:
        if name.lower() in text:
            return name
    return None


def hospitals_in_need(blood_type):
    return [name for name, inventory in HOSPITAL_BLOOD_INVENTORY.items()
            if inventory.get(blood_type, {}).get('demand') in URGENT_DEMAND]


def critical_types(hospital):
    return [blood_type for blood_type, info in HOSPITAL_BLOOD_INVENTORY[hospital].items()
            if info.get('demand') == 'critical']


def _blood_type_reply(text):
    blood_type = find_blood_type(text)
    if blood_type is None:
        return "What's your blood type? I can tell you about compatibility and current demand."
    hospitals = hospitals_in_need(blood_type)
    if hospitals:
        return (f"Your blood type {blood_type} is currently in high demand at "
                f"{', '.join(hospitals)}. Would you like to schedule a donation?")
    return (f"Your blood type {blood_type} is valuable for donation. The current demand is "
            f"stable, but regular donations are always appreciated.")


def _hospital_reply(text):
    hospital = find_hospital(text)
    if hospital is None:
        return "We partner with several hospitals in the area. Which one would you like information about?"
    types = critical_types(hospital)
    if types:
        return f"{hospital} currently has a critical need for blood types {', '.join(types)}. Can you help?"
    return f"{hospital} has a stable blood supply at the moment, but regular donations are always welcome."


def generate_response(message):
    text = message.lower()

    # First matching category wins
    if _mentions(text, BLOOD_TYPE_KEYWORDS):
        return _blood_type_reply(text)
    if _mentions(text, HOSPITAL_KEYWORDS):
        return _hospital_reply(text)
    if _mentions(text, PROCESS_KEYWORDS):
        return PROCESS_REPLY
    if _mentions(text, ELIGIBILITY_KEYWORDS):
        return ELIGIBILITY_REPLY
    return DEFAULT_REPLY
