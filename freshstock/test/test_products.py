"""
Route tests for /api/v1/products
"""
from freshstock.test import factories

BASE = '/api/v1/products'

NEW_PRODUCT = {
    'description': 'Frozen corn', 'expiration_rate': 20, 'freezing_rate': 3, 'height': 12.5, 'length': 30.5,
    'net_weight': 2.5, 'product_code': 'CORN-1', 'recommended_freezing_temperature': -18.5, 'width': 9.5,
    'product_type_id': 1,
}


def test_create_product_without_seller_omits_seller_id(client):
    response = client.post(BASE, json=NEW_PRODUCT)

    assert response.status_code == 201
    data = response.get_json()['data']
    assert data == dict(NEW_PRODUCT, id=1)
    assert 'seller_id' not in data


def test_create_product_with_seller(client, seed):
    seed(factories.locality(), factories.seller())

    response = client.post(BASE, json=dict(NEW_PRODUCT, seller_id=1))

    assert response.status_code == 201
    assert response.get_json()['data']['seller_id'] == 1


def test_create_product_missing_seller_is_not_found(client):
    response = client.post(BASE, json=dict(NEW_PRODUCT, seller_id=5))

    assert response.status_code == 404
    assert response.get_json()['message'] == 'seller not found'


def test_create_product_unknown_type_is_conflict(client):
    response = client.post(BASE, json=dict(NEW_PRODUCT, product_type_id=40))

    assert response.status_code == 409
    assert response.get_json()['message'] == 'a column table constraint fails'


def test_create_product_duplicate_code(client, seed):
    seed(factories.product(product_code='CORN-1'))

    response = client.post(BASE, json=NEW_PRODUCT)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'product code already exists'


def test_create_product_missing_field_is_bad_request(client):
    body = dict(NEW_PRODUCT)
    del body['width']

    response = client.post(BASE, json=body)

    assert response.status_code == 400


def test_create_product_wrong_type_is_unprocessable(client):
    response = client.post(BASE, json=dict(NEW_PRODUCT, expiration_rate='soon'))

    assert response.status_code == 422


def test_update_product_partial(client, seed):
    seed(factories.product())

    response = client.patch(f'{BASE}/1', json={'description': 'Green peas', 'net_weight': 0.5})

    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['description'] == 'Green peas'
    assert data['net_weight'] == 0.5
    assert data['product_code'] == 'PEAS-1'


def test_update_product_not_found(client):
    response = client.patch(f'{BASE}/7', json={'description': 'x'})

    assert response.status_code == 404
    assert response.get_json()['message'] == 'product not found'


def test_invalid_id(client):
    response = client.delete(f'{BASE}/x1')

    assert response.status_code == 400
    assert response.get_json()['message'] == 'invalid ID'


def test_report_records(client, seed):
    seed(
        factories.product(product_code='A', description='Peas'),
        factories.product(product_code='B', description='Corn'),
        factories.product_record(product_id=1),
        factories.product_record(product_id=1),
        factories.product_record(product_id=2),
    )

    response = client.get(f'{BASE}/reportRecords')

    assert response.status_code == 200
    assert response.get_json()['data'] == [
        {'product_id': 1, 'description': 'Peas', 'records_count': 2},
        {'product_id': 2, 'description': 'Corn', 'records_count': 1},
    ]


def test_report_records_unknown_product(client):
    response = client.get(f'{BASE}/reportRecords?id=3')

    assert response.status_code == 404


def test_delete_product(client, seed):
    seed(factories.product())

    assert client.delete(f'{BASE}/1').status_code == 204
    assert client.delete(f'{BASE}/1').status_code == 404
