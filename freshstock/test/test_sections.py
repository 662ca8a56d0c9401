"""
Route tests for /api/v1/sections
"""
from freshstock.test import factories

BASE = '/api/v1/sections'

NEW_SECTION = {
    'section_number': 7, 'current_temperature': -2, 'minimum_temperature': -6, 'current_capacity': 3,
    'minimum_capacity': 1, 'maximum_capacity': 20, 'warehouse_id': 1, 'product_type_id': 2,
}


def test_update_section_with_empty_body_changes_nothing(client, seed):
    """An empty patch answers the stored section untouched"""
    seed(factories.warehouse(), factories.section())
    before = client.get(f'{BASE}/1').get_json()['data']

    response = client.patch(f'{BASE}/1', json={})

    assert response.status_code == 200
    assert response.get_json()['data'] == before
    assert client.get(f'{BASE}/1').get_json()['data'] == before


def test_update_section_keeps_zero_values(client, seed):
    """Zero is a value, not an omission"""
    seed(factories.warehouse(), factories.section(current_temperature=-1))

    response = client.patch(f'{BASE}/1', json={'current_temperature': 0, 'current_capacity': 0})

    assert response.status_code == 200
    data = response.get_json()['data']
    assert data['current_temperature'] == 0
    assert data['current_capacity'] == 0
    assert data['minimum_temperature'] == -5


def test_update_section_bad_body_is_bad_request(client, seed):
    seed(factories.warehouse(), factories.section())

    response = client.patch(f'{BASE}/1', json={'section_number': 'seven'})

    assert response.status_code == 400
    assert response.get_json()['code'] == 'bad_request'


def test_update_section_to_taken_number_is_conflict(client, seed):
    seed(factories.warehouse(), factories.section(section_number=1), factories.section(section_number=2))

    response = client.patch(f'{BASE}/2', json={'section_number': 1})

    assert response.status_code == 409
    assert response.get_json()['message'] == 'a section with the section_number 1 already exists'


def test_create_section(client, seed):
    seed(factories.warehouse())

    response = client.post(BASE, json=NEW_SECTION)

    assert response.status_code == 201
    assert response.get_json()['data'] == dict(NEW_SECTION, id=1)


def test_create_section_missing_warehouse_is_conflict(client):
    response = client.post(BASE, json=NEW_SECTION)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'the given id does not have a warehouse attached to it'


def test_create_section_missing_product_type_is_conflict(client, seed):
    seed(factories.warehouse())

    response = client.post(BASE, json=dict(NEW_SECTION, product_type_id=42))

    assert response.status_code == 409
    assert response.get_json()['message'] == 'the given id does not have a product type attached to it'


def test_create_section_missing_field_is_unprocessable(client):
    body = dict(NEW_SECTION)
    del body['maximum_capacity']

    response = client.post(BASE, json=body)

    assert response.status_code == 422


def test_get_section_not_found(client):
    response = client.get(f'{BASE}/5')

    assert response.status_code == 404
    assert response.get_json()['message'] == 'The section with id 5 does not exists'


def test_report_products_sums_batch_quantities(client, seed):
    seed(
        factories.warehouse(),
        factories.section(section_number=1),
        factories.section(section_number=2),
        factories.product(),
        factories.product_batch(batch_number=1, current_quantity=40, section_id=1),
        factories.product_batch(batch_number=2, current_quantity=15, section_id=1),
    )

    response = client.get(f'{BASE}/reportProducts')

    assert response.status_code == 200
    assert response.get_json()['data'] == [
        {'section_id': 1, 'section_number': 1, 'products_count': 55},
        {'section_id': 2, 'section_number': 2, 'products_count': 0},
    ]


def test_report_products_for_one_section(client, seed):
    seed(factories.warehouse(), factories.section(section_number=3))

    response = client.get(f'{BASE}/reportProducts?id=1')

    assert response.status_code == 200
    assert response.get_json()['data'] == [{'section_id': 1, 'section_number': 3, 'products_count': 0}]


def test_report_products_unknown_section(client):
    response = client.get(f'{BASE}/reportProducts?id=9')

    assert response.status_code == 404


def test_report_products_non_integer_id(client):
    response = client.get(f'{BASE}/reportProducts?id=x')

    assert response.status_code == 400
    assert response.get_json()['message'] == 'invalid id'


def test_delete_section(client, seed):
    seed(factories.warehouse(), factories.section())

    assert client.delete(f'{BASE}/1').status_code == 204
    assert client.get(f'{BASE}/1').status_code == 404


def test_create_section_oversized_integer_is_unprocessable(client, seed):
    """Integers wider than 64 bits are rejected at binding, before any query runs"""
    seed(factories.warehouse())

    response = client.post(BASE, json=dict(NEW_SECTION, section_number=2**70))

    assert response.status_code == 422
    assert response.get_json()['code'] == 'unprocessable_entity'


def test_update_section_oversized_integer_is_bad_request(client, seed):
    seed(factories.warehouse(), factories.section())

    response = client.patch(f'{BASE}/1', json={'maximum_capacity': -2**64})

    assert response.status_code == 400
    assert client.get(f'{BASE}/1').get_json()['data']['maximum_capacity'] == 50


def test_oversized_path_and_query_ids_are_bad_request(client):
    huge = str(2**70)

    assert client.get(f'{BASE}/{huge}').status_code == 400
    response = client.get(f'{BASE}/reportProducts?id={huge}')
    assert response.status_code == 400
    assert response.get_json()['message'] == 'invalid id'
