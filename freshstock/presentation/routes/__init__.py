"""
Routes package for the warehouse inventory API
One blueprint per entity, all mounted under API_PREFIX
"""

from freshstock.utils.logger import get_logger

logger = get_logger("freshstock.routes")

API_PREFIX = '/api/v1'


def init_app(app):
    """Register every entity blueprint with the Flask app"""
    from . import (
        buyers,
        carries,
        employees,
        inbound_orders,
        localities,
        product_batches,
        product_records,
        products,
        purchase_orders,
        sections,
        sellers,
        warehouses,
    )

    logger.debug("Initializing route blueprints")

    app.register_blueprint(sellers.bp, url_prefix=f'{API_PREFIX}/sellers')
    app.register_blueprint(localities.bp, url_prefix=f'{API_PREFIX}/localities')
    app.register_blueprint(warehouses.bp, url_prefix=f'{API_PREFIX}/warehouses')
    app.register_blueprint(carries.bp, url_prefix=f'{API_PREFIX}/carries')
    app.register_blueprint(employees.bp, url_prefix=f'{API_PREFIX}/employees')
    app.register_blueprint(buyers.bp, url_prefix=f'{API_PREFIX}/buyers')
    app.register_blueprint(sections.bp, url_prefix=f'{API_PREFIX}/sections')
    app.register_blueprint(products.bp, url_prefix=f'{API_PREFIX}/products')
    app.register_blueprint(product_batches.bp, url_prefix=f'{API_PREFIX}/productBatches')
    app.register_blueprint(product_records.bp, url_prefix=f'{API_PREFIX}/productRecords')
    app.register_blueprint(inbound_orders.bp, url_prefix=f'{API_PREFIX}/inboundOrders')
    app.register_blueprint(purchase_orders.bp, url_prefix=API_PREFIX)

    logger.debug("Route blueprints registered")
