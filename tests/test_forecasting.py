import random
from datetime import date

import pytest

from lifelink.services.forecasting import generate_time_series, shortage_analysis, urgency_level


@pytest.mark.parametrize('time_range,points', [('week', 7), ('month', 30), ('quarter', 90)])
def test_series_length_and_prediction_tail(time_range, points):
    series = generate_time_series('demand', time_range, today=date(2024, 7, 31), rng=random.Random(0))
    assert len(series) == points
    assert all(p['actual'] >= 0 and p['predicted'] >= 0 for p in series)
    assert all(p['predicted'] == 0 for p in series[:-7])
    assert all(p['predicted'] > 0 for p in series[-7:])


def test_series_dates_end_yesterday():
    series = generate_time_series('supply', 'week', today=date(2024, 3, 3), rng=random.Random(0))
    assert series[0]['date'] == 'Feb 25'
    assert series[-1]['date'] == 'Mar 2'


def test_supply_runs_below_demand_on_average():
    demand = generate_time_series('demand', 'quarter', rng=random.Random(5))
    supply = generate_time_series('supply', 'quarter', rng=random.Random(5))
    assert sum(p['actual'] for p in supply) < sum(p['actual'] for p in demand)


def test_same_seed_same_series():
    a = generate_time_series('demand', 'month', today=date(2024, 1, 1), rng=random.Random(42))
    b = generate_time_series('demand', 'month', today=date(2024, 1, 1), rng=random.Random(42))
    assert a == b


def test_unknown_metric_or_range():
    with pytest.raises(ValueError):
        generate_time_series('usage', 'week')
    with pytest.raises(ValueError):
        generate_time_series('demand', 'year')


def test_urgency_levels():
    assert urgency_level(95, 110) == 'Critical'
    assert urgency_level(85, 120) == 'High'
    assert urgency_level(45, 70) == 'High'
    assert urgency_level(25, 40) == 'High'
    assert urgency_level(35, 80) == 'Medium'
    assert urgency_level(10, 80) == 'Low'


def test_shortage_analysis():
    analysis = shortage_analysis()
    assert analysis['criticalTypes'] == ['O-']
    o_neg = next(row for row in analysis['bloodTypes'] if row['type'] == 'O-')
    assert o_neg['demandPercent'] == round(110 / 120 * 100, 1)
    assert len(analysis['monthlyTrends']) == 6


def test_forecast_endpoint(client):
    resp = client.get('/api/insights/forecast?metric=supply&range=month')
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['metric'] == 'supply'
    assert len(data['series']) == 30
    assert len(data['bloodTypes']) == 8


def test_forecast_endpoint_rejects_unknown_range(client):
    resp = client.get('/api/insights/forecast?range=decade')
    assert resp.status_code == 400
    assert 'range' in resp.get_json()['error']


def test_shortage_endpoint(client):
    resp = client.get('/api/insights/shortage')
    assert resp.status_code == 200
    assert len(resp.get_json()['bloodTypes']) == 8
