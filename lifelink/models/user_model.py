from datetime import datetime
from lifelink.extensions import db

class AccountColumns:
    """Columns shared by the users and admins tables."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100))
    email = db.Column(db.String(120), nullable=False, unique=True)
    password = db.Column(db.String(128), nullable=False)  # bcrypt hash
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'type': self.account_type,
            'createdAt': self.created_at.isoformat() if self.created_at else None
        }


class User(AccountColumns, db.Model):
    __tablename__ = 'users'
    account_type = 'user'


class Admin(AccountColumns, db.Model):
    __tablename__ = 'admins'
    account_type = 'admin'
