# main.py
import sys
from pathlib import Path
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError

ROOT_DIR = Path(__file__).resolve().parent
sys.path.append(str(ROOT_DIR))

import models  # noqa: F401  (registers tables on Base.metadata)
from config import settings
from database import engine, Base
from routes import products
from utils import get_logger

logger = get_logger("main")

app = FastAPI(title="Product Catalog")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(ROOT_DIR / "static")), name="static")
templates = Jinja2Templates(directory=str(ROOT_DIR / "templates"))

Base.metadata.create_all(bind=engine)

@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Database error"})

@app.get("/", response_class=RedirectResponse, include_in_schema=False)
async def read_root():
    return RedirectResponse(url="/products")

@app.get("/products", response_class=HTMLResponse, include_in_schema=False)
async def get_products_page(request: Request):
    return templates.TemplateResponse(request, "products.html", {"title": "Products"})

# Routers
app.include_router(products.router)
