import math
import random
from datetime import date, timedelta

METRIC_BASES = {'demand': 100, 'supply': 80}
RANGE_POINTS = {'week': 7, 'month': 30, 'quarter': 90}
PREDICTION_WINDOW = 7

BLOOD_TYPE_FORECAST = [
    {'name': 'A+', 'current': 120, 'predicted': 145, 'fill': '#FF6384'},
    {'name': 'A-', 'current': 40, 'predicted': 35, 'fill': '#36A2EB'},
    {'name': 'B+', 'current': 80, 'predicted': 95, 'fill': '#FFCE56'},
    {'name': 'B-', 'current': 25, 'predicted': 30, 'fill': '#4BC0C0'},
    {'name': 'AB+', 'current': 30, 'predicted': 25, 'fill': '#9966FF'},
    {'name': 'AB-', 'current': 10, 'predicted': 15, 'fill': '#FF9F40'},
    {'name': 'O+', 'current': 150, 'predicted': 180, 'fill': '#8AC926'},
    {'name': 'O-', 'current': 45, 'predicted': 60, 'fill': '#1982C4'},
]

SHORTAGE_BY_TYPE = [
    {'type': 'O+', 'shortage': 85, 'demand': 120, 'color': '#ef4444'},
    {'type': 'A+', 'shortage': 65, 'demand': 95, 'color': '#f97316'},
    {'type': 'B+', 'shortage': 45, 'demand': 70, 'color': '#eab308'},
    {'type': 'AB+', 'shortage': 25, 'demand': 40, 'color': '#22c55e'},
    {'type': 'O-', 'shortage': 95, 'demand': 110, 'color': '#dc2626'},
    {'type': 'A-', 'shortage': 55, 'demand': 80, 'color': '#f59e0b'},
    {'type': 'B-', 'shortage': 35, 'demand': 55, 'color': '#84cc16'},
    {'type': 'AB-', 'shortage': 15, 'demand': 25, 'color': '#10b981'},
]

MONTHLY_SHORTAGE_TRENDS = [
    {'month': 'Jan', 'shortage': 320, 'demand': 450},
    {'month': 'Feb', 'shortage': 280, 'demand': 420},
    {'month': 'Mar', 'shortage': 350, 'demand': 480},
    {'month': 'Apr', 'shortage': 290, 'demand': 440},
    {'month': 'May', 'shortage': 310, 'demand': 460},
    {'month': 'Jun', 'shortage': 340, 'demand': 490},
]


def _round_half_up(value):
    return int(math.floor(value + 0.5))


def _label(day):
    return f'{day:%b} {day.day}'


def generate_time_series(metric='demand', time_range='week', today=None, rng=None):
    """Sine-plus-noise history with a short predicted tail.

    Only the last seven points carry a prediction; earlier points report 0.
    """
    if metric not in METRIC_BASES:
        raise ValueError(f'Unknown metric: {metric}')
    if time_range not in RANGE_POINTS:
        raise ValueError(f'Unknown time range: {time_range}')
    rng = rng or random.Random()
    today = today or date.today()
    base = METRIC_BASES[metric]
    points = RANGE_POINTS[time_range]

    series = []
    for i in range(points):
        day = today - timedelta(days=points - i)
        variance = math.sin(i / 5) * 15
        trend = i * (0.5 + rng.random() * 0.2)
        noise = rng.random() * 10 - 5

        actual = max(0, _round_half_up(base + variance + noise))
        predicted = max(0, _round_half_up(actual + trend / 3 + rng.random() * 15 - 5))
        series.append({
            'date': _label(day),
            'actual': actual,
            'predicted': predicted if i > points - PREDICTION_WINDOW - 1 else 0,
        })
    return series


def urgency_level(shortage, demand):
    ratio = shortage / demand if demand else 1.0
    if ratio > 0.8:
        return 'Critical'
    if ratio > 0.6:
        return 'High'
    if ratio > 0.4:
        return 'Medium'
    return 'Low'


def shortage_analysis():
    max_value = max(max(row['shortage'], row['demand']) for row in SHORTAGE_BY_TYPE)
    by_type = []
    for row in SHORTAGE_BY_TYPE:
        by_type.append(dict(
            row,
            urgency=urgency_level(row['shortage'], row['demand']),
            shortagePercent=round(row['shortage'] / max_value * 100, 1),
            demandPercent=round(row['demand'] / max_value * 100, 1),
        ))
    return {
        'bloodTypes': by_type,
        'monthlyTrends': [dict(row) for row in MONTHLY_SHORTAGE_TRENDS],
        'criticalTypes': [row['type'] for row in by_type if row['urgency'] == 'Critical'],
    }
