from lifelink.services.chat import (
    DEFAULT_REPLY,
    ELIGIBILITY_REPLY,
    PROCESS_REPLY,
    find_blood_type,
    generate_response,
)


def test_blood_type_question_reports_hospitals_in_need():
    reply = generate_response("What's my blood type O+ demand?")
    assert reply == ("Your blood type O+ is currently in high demand at City General Hospital. "
                     "Would you like to schedule a donation?")


def test_blood_type_branch_wins_over_hospital_names():
    reply = generate_response('Which blood type does Memorial Hospital need, maybe O-?')
    assert reply.startswith('Your blood type O- is currently in high demand at')
    assert 'Memorial Hospital, City General Hospital, University Medical Center' in reply


def test_blood_type_spelled_out():
    reply = generate_response('my blood group is abnegative')
    assert reply.startswith('Your blood type AB- is currently in high demand')


def test_blood_type_with_stable_demand():
    reply = generate_response('blood type AB+')
    assert reply.startswith('Your blood type AB+ is valuable for donation.')


def test_ab_types_are_not_mistaken_for_b_types():
    assert find_blood_type('blood type ab+') == 'AB+'
    assert find_blood_type('blood type b+') == 'B+'
    assert find_blood_type('blood type apositive') == 'A+'
    assert find_blood_type('what is my blood type') is None


def test_loose_words_are_not_read_as_blood_types():
    assert find_blood_type('i have a positive feeling about my blood type') is None
    assert find_blood_type('is o negative rare') is None
    reply = generate_response('I have a positive feeling about my blood type')
    assert reply.startswith("What's your blood type?")


def test_blood_type_without_a_type_asks_for_it():
    reply = generate_response('Tell me about blood types')
    assert reply.startswith("What's your blood type?")


def test_hospital_with_critical_needs():
    reply = generate_response('How is City General Hospital doing?')
    assert reply == 'City General Hospital currently has a critical need for blood types B-, AB-, O-. Can you help?'


def test_hospital_with_stable_supply():
    reply = generate_response('Tell me about University Medical Center')
    assert reply.startswith('University Medical Center has a stable blood supply')


def test_unknown_hospital_prompts_for_one():
    reply = generate_response('Is there a clinic nearby?')
    assert reply.startswith('We partner with several hospitals')


def test_process_and_eligibility_branches():
    assert generate_response('How does the process work?') == PROCESS_REPLY
    # 'can i donate' contains 'donate', so the process reply comes first
    assert generate_response('Can I donate?') == PROCESS_REPLY
    assert generate_response('Am I eligible?') == ELIGIBILITY_REPLY


def test_default_greeting():
    assert generate_response('hello there') == DEFAULT_REPLY


def test_chat_endpoint(client):
    resp = client.post('/api/chat', json={'message': 'Am I eligible?'})
    assert resp.status_code == 200
    assert resp.get_json() == {'response': ELIGIBILITY_REPLY}


def test_chat_endpoint_requires_message(client):
    resp = client.post('/api/chat', json={})
    assert resp.status_code == 400
    assert resp.get_json() == {'error': 'Message is required'}

    resp = client.post('/api/chat', json={'message': ''})
    assert resp.status_code == 400
