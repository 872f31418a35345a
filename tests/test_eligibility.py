import pytest

from lifelink.services.eligibility import (
    CONDITIONALLY_ELIGIBLE,
    ELIGIBLE,
    NOT_ELIGIBLE,
    assess,
    coerce_int,
    eligibility_verdict,
    score_eligibility,
)


@pytest.mark.parametrize('age', [18, 30, 65])
@pytest.mark.parametrize('weight', [50, 72, 140])
def test_healthy_adult_scores_full_marks(age, weight):
    result = assess(age, weight, False)
    assert result.score == 100
    assert result.verdict == ELIGIBLE


@pytest.mark.parametrize('age', [66, 70, 75])
@pytest.mark.parametrize('weight', [45, 47, 49])
def test_older_light_recently_ill_donor_is_not_eligible(age, weight):
    result = assess(age, weight, True)
    assert result.score == 20 + 15
    assert result.verdict == NOT_ELIGIBLE


def test_terms_add_up_independently():
    assert score_eligibility(17, 80, False) == 60
    assert score_eligibility(76, 80, False) == 60
    assert score_eligibility(40, 44, False) == 70
    assert score_eligibility(40, 60, True) == 70
    assert score_eligibility(10, 30, True) == 0


def test_score_never_decreases_as_weight_rises():
    for age in (16, 30, 70, 90):
        for ill in (True, False):
            scores = [score_eligibility(age, w, ill) for w in range(30, 70)]
            assert scores == sorted(scores)


def test_verdict_thresholds():
    assert eligibility_verdict(100) == ELIGIBLE
    assert eligibility_verdict(70) == ELIGIBLE
    assert eligibility_verdict(69) == CONDITIONALLY_ELIGIBLE
    assert eligibility_verdict(50) == CONDITIONALLY_ELIGIBLE
    assert eligibility_verdict(49) == NOT_ELIGIBLE
    assert eligibility_verdict(0) == NOT_ELIGIBLE


def test_form_strings_are_read_like_the_form_does():
    assert coerce_int('25') == 25
    assert coerce_int(' 72.9') == 72
    assert coerce_int('30kg') == 30
    assert coerce_int('abc') is None
    assert coerce_int('') is None
    assert coerce_int(None) is None
    assert coerce_int(True) is None


def test_unparsable_fields_contribute_nothing():
    assert score_eligibility('abc', '', False) == 30
    assert score_eligibility(None, None, None) == 30
    assert score_eligibility('30', '55.5', 'false') == 100
    assert score_eligibility('30', '55', 'true') == 70


def test_result_carries_advice_text():
    result = assess(30, 47, True)
    assert result.score == 55
    assert result.verdict == CONDITIONALLY_ELIGIBLE
    assert result.eligible
    assert 'additional medical screening' in result.message
    assert result.to_dict()['eligible'] is True


def test_eligibility_endpoint(client):
    resp = client.post('/api/donors/eligibility', json={
        'name': 'Ada', 'age': '30', 'weight': '62', 'bloodType': 'o+',
        'location': 'Downtown', 'recentIllness': False
    })
    assert resp.status_code == 200
    data = resp.get_json()
    assert data['score'] == 100
    assert data['verdict'] == 'Eligible'
    assert data['title'] == 'You are eligible to donate!'
    assert data['donor'] == {'name': 'Ada', 'bloodType': 'O+', 'location': 'Downtown'}


def test_eligibility_endpoint_is_permissive(client):
    resp = client.post('/api/donors/eligibility', json={'age': 'old', 'weight': None})
    assert resp.status_code == 200
    assert resp.get_json()['score'] == 30
    assert resp.get_json()['verdict'] == 'Not Eligible'


def test_eligibility_endpoint_rejects_non_object_body(client):
    resp = client.post('/api/donors/eligibility', json=[1, 2])
    assert resp.status_code == 400
    assert 'error' in resp.get_json()
