from lifelink.models.donor_model import Donor
from lifelink.models.hospital_model import Hospital
from lifelink.models.user_model import Admin, User

# Account model per login/register table name
ACCOUNT_MODELS = {
    'donors': Donor,
    'hospitals': Hospital,
    'users': User,
    'admins': Admin,
}
