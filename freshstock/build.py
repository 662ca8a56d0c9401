#!/usr/bin/env python3
"""
Schema build for the warehouse inventory service
Creates every table and seeds the lookup data the API references but does not manage
"""

from freshstock import db
from freshstock.utils.logger import get_logger

logger = get_logger("freshstock.build")

PRODUCT_TYPES = (
    (1, 'frozen'),
    (2, 'refrigerated'),
    (3, 'dry'),
)

ORDER_STATUSES = (
    (1, 'pending'),
    (2, 'in transit'),
    (3, 'delivered'),
)


def build_tables():
    """Create all tables that do not exist yet"""
    from freshstock import data  # noqa: F401

    logger.debug("Creating tables")
    db.create_all()


def seed_lookups():
    """
    Insert lookup rows that are missing

    Returns:
        int: Number of rows inserted
    """
    from freshstock.data.lookups import OrderStatus, ProductType

    inserted = 0
    for model, rows in ((ProductType, PRODUCT_TYPES), (OrderStatus, ORDER_STATUSES)):
        for row_id, description in rows:
            if db.session.get(model, row_id) is None:
                db.session.add(model(id=row_id, description=description))
                inserted += 1
    db.session.commit()
    if inserted:
        logger.info(f"Seeded {inserted} lookup rows")
    return inserted


def verify_lookups():
    """
    Verify that the lookup data is present

    Returns:
        bool: True if every seeded lookup row exists
    """
    from freshstock.data.lookups import OrderStatus, ProductType

    for model, rows in ((ProductType, PRODUCT_TYPES), (OrderStatus, ORDER_STATUSES)):
        for row_id, _ in rows:
            if db.session.get(model, row_id) is None:
                logger.warning(f"{model.__tablename__} row {row_id} not found")
                return False
    return True


def build_database(seed=True):
    """
    Build the schema and, unless told otherwise, seed lookup data.
    Must run inside an application context.

    Args:
        seed (bool): Insert missing lookup rows
    """
    build_tables()
    if seed:
        seed_lookups()
        if not verify_lookups():
            raise RuntimeError("Lookup data could not be verified after seeding")
    logger.info("Database build complete")
