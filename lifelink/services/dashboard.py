from datetime import date, timedelta

DONATION_INTERVAL_DAYS = 56
ML_PER_DONATION = 450
PATIENTS_PER_DONATION = 3

DEMO_SESSION_USER = {
    'id': '1',
    'name': 'John Donor',
    'email': 'donor@example.com',
    'type': 'donor',
    'bloodType': 'O+',
    'lastDonation': '2023-10-15',
    'donationCount': 5,
    'eligibleToDonateDays': 0,
}

DONOR_PROFILE = {
    'name': 'John Doe',
    'email': 'john.doe@example.com',
    'bloodType': 'O+',
    'address': '123 Main St, Anytown, USA',
    'phone': '(555) 123-4567',
    'dateOfBirth': '1990-01-15',
    'gender': 'Male',
    'createdAt': '2023-05-10',
}

DONATION_HISTORY = [
    {'date': '2024-05-15', 'location': 'Central Hospital', 'bloodVolume': 450, 'status': 'completed'},
    {'date': '2024-01-20', 'location': 'Community Blood Center', 'bloodVolume': 450, 'status': 'completed'},
    {'date': '2023-09-05', 'location': 'University Medical Center', 'bloodVolume': 450, 'status': 'completed'},
    {'date': '2023-05-12', 'location': 'Central Hospital', 'bloodVolume': 450, 'status': 'completed'},
]

NEARBY_DRIVES = [
    {'id': 1, 'name': 'Community Blood Drive', 'date': '2024-07-20', 'distance': '0.8 miles'},
    {'id': 2, 'name': 'University Hospital Drive', 'date': '2024-07-25', 'distance': '1.2 miles'},
    {'id': 3, 'name': 'Corporate Blood Drive', 'date': '2024-08-01', 'distance': '2.5 miles'},
]

HOSPITAL_PROFILE = {
    'name': 'Central Hospital',
    'email': 'admin@centralhospital.com',
    'address': '456 Medical Center Blvd, Anytown, USA',
    'phone': '(555) 987-6543',
    'website': 'https://centralhospital.com',
    'licenseNumber': 'MED-12345-HC',
    'createdAt': '2022-03-15',
}

HOSPITAL_INVENTORY = {
    'A+': {'units': 25, 'demand': 'low', 'capacity': 50, 'expiringUnits': 2},
    'A-': {'units': 10, 'demand': 'medium', 'capacity': 30, 'expiringUnits': 0},
    'B+': {'units': 15, 'demand': 'low', 'capacity': 40, 'expiringUnits': 1},
    'B-': {'units': 5, 'demand': 'medium', 'capacity': 20, 'expiringUnits': 0},
    'AB+': {'units': 8, 'demand': 'medium', 'capacity': 15, 'expiringUnits': 0},
    'AB-': {'units': 3, 'demand': 'high', 'capacity': 10, 'expiringUnits': 0},
    'O+': {'units': 4, 'demand': 'high', 'capacity': 60, 'expiringUnits': 0},
    'O-': {'units': 2, 'demand': 'high', 'capacity': 30, 'expiringUnits': 0},
}

UPCOMING_DONATIONS = [
    {'id': '101', 'date': '2024-07-15', 'time': '09:00:00', 'donorName': 'Alice Smith', 'bloodType': 'A+', 'status': 'scheduled', 'firstTime': False},
    {'id': '102', 'date': '2024-07-15', 'time': '10:30:00', 'donorName': 'Bob Johnson', 'bloodType': 'O-', 'status': 'scheduled', 'firstTime': True},
    {'id': '103', 'date': '2024-07-16', 'time': '14:00:00', 'donorName': 'Carol Williams', 'bloodType': 'B+', 'status': 'scheduled', 'firstTime': False},
    {'id': '104', 'date': '2024-07-17', 'time': '11:15:00', 'donorName': 'David Brown', 'bloodType': 'AB+', 'status': 'scheduled', 'firstTime': False},
    {'id': '105', 'date': '2024-07-18', 'time': '16:30:00', 'donorName': 'Emma Davis', 'bloodType': 'O+', 'status': 'scheduled', 'firstTime': True},
]

RECENT_ACTIVITY = [
    {'id': '201', 'action': 'Blood donation received', 'bloodType': 'A+', 'quantity': 450, 'timestamp': '2024-07-10T14:30:00Z'},
    {'id': '202', 'action': 'Appointment scheduled', 'bloodType': 'O-', 'quantity': None, 'timestamp': '2024-07-10T10:15:00Z'},
    {'id': '203', 'action': 'Blood donation received', 'bloodType': 'B+', 'quantity': 450, 'timestamp': '2024-07-09T16:45:00Z'},
    {'id': '204', 'action': 'Status updated', 'bloodType': 'AB-', 'quantity': None, 'timestamp': '2024-07-09T09:20:00Z'},
    {'id': '205', 'action': 'Blood donation received', 'bloodType': 'O+', 'quantity': 450, 'timestamp': '2024-07-08T11:10:00Z'},
]

EMERGENCY_ALERTS = [
    {'type': 'critical', 'message': 'Urgent need for O- blood type', 'date': '2024-07-10', 'createdAt': '2024-07-10T08:30:00Z'},
    {'type': 'warning', 'message': 'Low inventory for AB- blood type', 'date': '2024-07-09', 'createdAt': '2024-07-09T14:15:00Z'},
    {'type': 'info', 'message': 'Blood drive scheduled for next week', 'date': '2024-07-08', 'createdAt': '2024-07-08T10:45:00Z'},
]

# usage in ml
MONTHLY_STATS = [
    {'month': 'Jul', 'donations': 45, 'usage': 20250},
    {'month': 'Jun', 'donations': 42, 'usage': 18900},
    {'month': 'May', 'donations': 38, 'usage': 17100},
    {'month': 'Apr', 'donations': 40, 'usage': 18000},
    {'month': 'Mar', 'donations': 35, 'usage': 15750},
    {'month': 'Feb', 'donations': 30, 'usage': 13500},
]

DONATION_GROWTH = 12


def donation_wait(last_donation, today=None):
    """Days left until the next whole-blood donation and the date it opens."""
    today = today or date.today()
    if last_donation is None:
        return 0, today.isoformat()
    days_since = (today - date.fromisoformat(last_donation)).days
    wait = max(0, DONATION_INTERVAL_DAYS - days_since)
    return wait, (today + timedelta(days=wait)).isoformat()


def donor_dashboard(donor_id, today=None):
    history = [dict(entry) for entry in DONATION_HISTORY]
    last_donation = history[0]['date'] if history else None
    wait, next_date = donation_wait(last_donation, today)
    total_ml = sum(entry['bloodVolume'] for entry in history)

    return dict(
        DONOR_PROFILE,
        id=donor_id,
        lastDonation=last_donation,
        eligibleToDonateDays=wait,
        nextEligibleDate=next_date,
        donationCount=len(history),
        donationStreak=3,
        badges=['First Time Donor', 'Regular Donor', 'Life Saver'],
        donationHistory=history,
        impactStats={
            'livesSaved': len(history) * PATIENTS_PER_DONATION,
            'hospitalsHelped': len({entry['location'] for entry in history}),
            'totalBloodVolume': f'{total_ml} ml',
            'donorRank': 'Gold',
            'percentile': 85,
        },
        nearbyDrives=[dict(drive) for drive in NEARBY_DRIVES],
    )


def hospital_dashboard(hospital_id):
    this_month = MONTHLY_STATS[0]
    collected_ml = this_month['usage']

    return dict(
        HOSPITAL_PROFILE,
        id=hospital_id,
        contactInfo={
            'phone': HOSPITAL_PROFILE['phone'],
            'email': HOSPITAL_PROFILE['email'],
            'website': HOSPITAL_PROFILE['website'],
        },
        stats={
            'donorsThisMonth': this_month['donations'],
            'bloodCollectedL': collected_ml / 1000,
            'patientsHelped': (collected_ml // ML_PER_DONATION) * PATIENTS_PER_DONATION,
            'donationGrowth': DONATION_GROWTH,
        },
        bloodInventory={blood_type: dict(info) for blood_type, info in HOSPITAL_INVENTORY.items()},
        upcomingDonations=[dict(entry) for entry in UPCOMING_DONATIONS],
        emergencyAlerts=[dict(alert) for alert in EMERGENCY_ALERTS],
        recentActivity=[dict(entry) for entry in RECENT_ACTIVITY],
        monthlyStats=[
            {'month': stat['month'], 'donations': stat['donations'], 'usage': round(stat['usage'] / 1000)}
            for stat in MONTHLY_STATS
        ],
    )
