"""
Application level tests: error envelopes, request ids and the schema build
"""
from freshstock import db
from freshstock.build import ORDER_STATUSES, PRODUCT_TYPES, seed_lookups, verify_lookups
from freshstock.data.lookups import OrderStatus, ProductType
from freshstock.errors import Internal


def test_unexpected_error_is_an_empty_500(app, client):
    def explode():
        raise KeyError('secret column name')

    app.add_url_rule('/explode', 'explode', explode)

    response = client.get('/explode')

    assert response.status_code == 500
    assert response.get_json() == {'code': 'internal_server_error', 'message': ''}


def test_internal_error_message_is_not_exposed(app, client):
    def fail():
        raise Internal('(sqlite3.OperationalError) no such table: buyers')

    app.add_url_rule('/fail', 'fail', fail)

    response = client.get('/fail')

    assert response.status_code == 500
    assert response.get_json()['message'] == ''


def test_unknown_route_uses_error_envelope(client):
    response = client.get('/api/v1/nothing-here')

    assert response.status_code == 404
    assert response.get_json()['code'] == 'not_found'


def test_wrong_method_uses_error_envelope(client):
    response = client.put('/api/v1/buyers/1', json={})

    assert response.status_code == 405
    assert response.get_json()['code'] == 'method_not_allowed'


def test_request_id_is_generated(client):
    response = client.get('/api/v1/buyers')

    assert len(response.headers['X-Request-ID']) == 32


def test_build_seeds_lookups(app):
    assert db.session.query(ProductType).count() == len(PRODUCT_TYPES)
    assert db.session.query(OrderStatus).count() == len(ORDER_STATUSES)
    assert verify_lookups()


def test_seed_lookups_is_idempotent(app):
    assert seed_lookups() == 0
