"""
Route tests for /api/v1/sellers
"""
from freshstock.test import factories

BASE = '/api/v1/sellers'

NEW_SELLER = {
    'cid': 10, 'company_name': 'Green Leaf', 'address': 'Calle 1', 'telephone': '221-555-0000',
    'locality_id': '1900',
}


def test_create_seller(client, seed):
    seed(factories.locality())

    response = client.post(BASE, json=NEW_SELLER)

    assert response.status_code == 201
    assert response.get_json()['data'] == dict(NEW_SELLER, id=1)


def test_create_seller_missing_locality(client):
    response = client.post(BASE, json=NEW_SELLER)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'locality not found'


def test_create_seller_duplicate_cid(client, seed):
    seed(factories.locality(), factories.seller(cid=10))

    response = client.post(BASE, json=NEW_SELLER)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'cid already exists'


def test_create_seller_missing_field_is_bad_request(client):
    body = dict(NEW_SELLER)
    del body['telephone']

    response = client.post(BASE, json=body)

    assert response.status_code == 400
    assert response.get_json()['message'] == 'Bad Request, missing required fields'


def test_create_seller_wrong_type_is_unprocessable(client):
    response = client.post(BASE, json=dict(NEW_SELLER, cid='10'))

    assert response.status_code == 422


def test_update_seller_partial(client, seed):
    seed(factories.locality(), factories.seller())

    response = client.patch(f'{BASE}/1', json={'company_name': 'Fresh Farms SA', 'telephone': None})

    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['company_name'] == 'Fresh Farms SA'
    assert data['telephone'] == '221-555-0101', "A null field is treated as not sent"


def test_update_seller_to_missing_locality(client, seed):
    seed(factories.locality(), factories.seller())

    response = client.patch(f'{BASE}/1', json={'locality_id': '0000'})

    assert response.status_code == 409
    assert response.get_json()['message'] == 'locality not found'


def test_get_seller_not_found(client):
    response = client.get(f'{BASE}/4')

    assert response.status_code == 404
    assert response.get_json()['message'] == 'Id 4 does not exist'


def test_delete_seller(client, seed):
    seed(factories.locality(), factories.seller())

    assert client.delete(f'{BASE}/1').status_code == 204
    assert client.get(BASE).get_json() == {'data': []}
