"""
Route tests for /api/v1/carries
"""
from freshstock.test import factories

BASE = '/api/v1/carries'

NEW_CARRY = {
    'cid': 'CAR-9', 'company_name': 'Cold Trucks', 'address': 'Ruta 2', 'telephone': '221-555-0111',
    'locality_id': '1900',
}


def test_create_carry(client, seed):
    seed(factories.locality())

    response = client.post(BASE, json=NEW_CARRY)

    assert response.status_code == 201
    assert response.get_json()['data'] == dict(NEW_CARRY, id=1)


def test_create_carry_cid_too_long(client, seed):
    seed(factories.locality())

    response = client.post(BASE, json=dict(NEW_CARRY, cid='C' * 11))

    assert response.status_code == 422
    assert response.get_json()['message'] == 'a field exceeds the maximum length'


def test_create_carry_cid_at_limit(client, seed):
    seed(factories.locality())

    response = client.post(BASE, json=dict(NEW_CARRY, cid='C' * 10))

    assert response.status_code == 201


def test_create_carry_duplicate_cid(client, seed):
    seed(factories.locality(), factories.carry(cid='CAR-9'))

    response = client.post(BASE, json=NEW_CARRY)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'carry cid already exists'


def test_create_carry_missing_locality(client):
    response = client.post(BASE, json=NEW_CARRY)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'a column table constraint fails'


def test_create_carry_invalid_body(client):
    response = client.post(BASE, json=dict(NEW_CARRY, cid=9))

    assert response.status_code == 422
    assert response.get_json()['message'] == 'invalid request body'
