"""
Route tests for /api/v1/productBatches
"""
from freshstock.test import factories

BASE = '/api/v1/productBatches'

NEW_BATCH = {
    'batch_number': 500, 'current_quantity': 10, 'current_temperature': -10, 'due_date': '2030-03-01',
    'initial_quantity': 12, 'manufacturing_date': '2030-01-15', 'manufacturing_hour': 9,
    'minimum_temperature': -20, 'product_id': 1, 'section_id': 1,
}


def seed_stock_location(seed):
    seed(factories.warehouse(), factories.section(), factories.product())


def test_create_batch(client, seed):
    seed_stock_location(seed)

    response = client.post(BASE, json=NEW_BATCH)

    assert response.status_code == 201
    assert response.get_json()['data'] == dict(NEW_BATCH, id=1)


def test_create_batch_normalizes_dates(client, seed):
    seed_stock_location(seed)

    response = client.post(BASE, json=dict(NEW_BATCH, due_date='2030-3-1'))

    assert response.status_code == 201
    assert response.get_json()['data']['due_date'] == '2030-03-01'


def test_create_batch_bad_date(client, seed):
    seed_stock_location(seed)

    response = client.post(BASE, json=dict(NEW_BATCH, manufacturing_date='15-01-2030'))

    assert response.status_code == 400
    assert response.get_json()['message'] == 'the string provided does not match the valid date format yyyy-mm-dd'


def test_create_batch_duplicate_number(client, seed):
    seed_stock_location(seed)
    seed(factories.product_batch(batch_number=500))

    response = client.post(BASE, json=NEW_BATCH)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'a product batch with the batch_number 500 already exists'


def test_create_batch_missing_product(client, seed):
    seed(factories.warehouse(), factories.section())

    response = client.post(BASE, json=NEW_BATCH)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'the given id does not have a product attached to it'


def test_create_batch_missing_section(client, seed):
    seed(factories.product())

    response = client.post(BASE, json=NEW_BATCH)

    assert response.status_code == 409
    assert response.get_json()['message'] == 'the given id does not have a section attached to it'
