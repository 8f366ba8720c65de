# routes/products.py

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session
from typing import List

import schemas
from database import get_db
from crud import product as crud_product
from utils import get_logger

logger = get_logger("routes.products")

router = APIRouter(
    prefix="/api/products",
    tags=["Products"],
    responses={404: {"description": "Not found"}},
)

def _not_found(product_id: int) -> HTTPException:
    logger.warning("Product id=%s not found", product_id)
    return HTTPException(status_code=404, detail="Product not found")

@router.get("", response_model=List[schemas.Product])
def get_products(db: Session = Depends(get_db)):
    """
    Get every product in the catalog.
    """
    return crud_product.get_products(db)

@router.get("/{product_id}", response_model=schemas.Product)
def get_product_details(product_id: int, db: Session = Depends(get_db)):
    db_product = crud_product.get_product(db, product_id=product_id)
    if not db_product:
        raise _not_found(product_id)
    return db_product

@router.post("", response_model=schemas.Product, status_code=201)
def create_product(product: schemas.ProductCreate, db: Session = Depends(get_db)):
    return crud_product.create_product(db, product=product)

@router.put("/{product_id}", response_model=schemas.Product)
def update_product(product_id: int, product: schemas.ProductUpdate, db: Session = Depends(get_db)):
    """Replaces name and price of an existing product; the id never changes."""
    db_product = crud_product.update_product(db, product_id=product_id, product=product)
    if not db_product:
        raise _not_found(product_id)
    return db_product

@router.delete("/{product_id}", status_code=204)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    if not crud_product.delete_product(db, product_id=product_id):
        raise _not_found(product_id)
    return Response(status_code=204)
