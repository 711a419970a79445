# fixup/catalog_main.py
import logging

from fixup.api.app import create_app
from fixup.api.routes import categories, category_types, subcategories
from fixup.db.base import Base, engine
from fixup.db import models  # noqa: F401

logger = logging.getLogger(__name__)

app = create_app(
    "fixup-catalog",
    [category_types.router, categories.router, subcategories.router],
)


@app.on_event("startup")
def startup():
    Base.metadata.create_all(bind=engine)
    logger.info("Catalog service startup")


@app.on_event("shutdown")
def shutdown():
    engine.dispose()
    logger.info("Catalog service shutdown")


@app.get("/")
def root():
    return {"message": "Catalog service running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
