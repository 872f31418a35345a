import click
from flask.cli import with_appcontext

from lifelink.extensions import bcrypt, db
from lifelink.models import Admin, Donor, Hospital, User

DEMO_PASSWORD = 'lifelink-demo'


def _hash(password):
    return bcrypt.generate_password_hash(password).decode('utf-8')


def seed_demo_accounts(password=DEMO_PASSWORD):
    """Create one demo account per table; existing emails are left alone."""
    accounts = [
        Donor(name='John Donor', email='donor@example.com', password=_hash(password), blood_type='O+'),
        Hospital(name='Memorial Hospital', email='hospital@example.com', password=_hash(password),
                 location='123 Medical Ave'),
        User(name='Demo User', email='user@example.com', password=_hash(password)),
        Admin(name='Demo Admin', email='admin@example.com', password=_hash(password)),
    ]
    created = []
    for account in accounts:
        if type(account).query.filter_by(email=account.email).first():
            continue
        db.session.add(account)
        created.append(account)
    db.session.commit()
    return created


@click.command('seed-demo')
@click.option('--password', default=DEMO_PASSWORD, show_default=True, help='Password for every demo account.')
@with_appcontext
def seed_demo_command(password):
    """Create the tables and the demo accounts."""
    db.create_all()
    created = seed_demo_accounts(password)
    for account in created:
        click.echo(f'created {account.account_type} {account.email}')
    click.echo(f'{len(created)} demo account(s) created.')
