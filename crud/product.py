# crud/product.py

from typing import List, Optional
from sqlalchemy.orm import Session
import models
import schemas
from utils import get_logger

logger = get_logger("crud.product")


def get_products(db: Session) -> List[models.Product]:
    """
    Get every product, ordered by id.
    """
    return db.query(models.Product).order_by(models.Product.id.asc()).all()

def get_product(db: Session, product_id: int) -> Optional[models.Product]:
    return db.query(models.Product).filter(models.Product.id == product_id).first()

def create_product(db: Session, product: schemas.ProductCreate) -> models.Product:
    """Inserts a new product; the id is assigned by the database."""
    db_product = models.Product(name=product.name, price=product.price)
    db.add(db_product)
    try:
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Commit failed on product create: %s", e)
        raise
    db.refresh(db_product)
    logger.info("Created product id=%s name=%r price=%s", db_product.id, db_product.name, db_product.price)
    return db_product

def update_product(db: Session, product_id: int, product: schemas.ProductUpdate) -> Optional[models.Product]:
    """
    Overwrites name and price of an existing product in place.
    Returns None when no product has the given id.
    """
    db_product = get_product(db, product_id)
    if not db_product:
        return None

    db_product.name = product.name
    db_product.price = product.price
    try:
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Commit failed on product update id=%s: %s", product_id, e)
        raise
    db.refresh(db_product)
    logger.info("Updated product id=%s name=%r price=%s", db_product.id, db_product.name, db_product.price)
    return db_product

def delete_product(db: Session, product_id: int) -> bool:
    """Deletes a product by id. Returns False when nothing was deleted."""
    try:
        count = db.query(models.Product).filter(models.Product.id == product_id).delete(synchronize_session=False)
        db.commit()
    except Exception as e:
        db.rollback()
        logger.exception("Delete failed for product id=%s: %s", product_id, e)
        raise
    if count:
        logger.info("Deleted product id=%s", product_id)
    return bool(count)
