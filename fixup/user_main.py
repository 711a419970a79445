# fixup/user_main.py
import logging

from fixup.api.app import create_app
from fixup.api.routes import auth, users
from fixup.db.base import Base, engine
from fixup.db.redis import redis_client
from fixup.db import models  # noqa: F401

logger = logging.getLogger(__name__)

app = create_app("fixup-user", [auth.router, users.router])


@app.on_event("startup")
def startup():
    Base.metadata.create_all(bind=engine)
    logger.info("User service startup")


@app.on_event("shutdown")
def shutdown():
    engine.dispose()
    redis_client.close()
    logger.info("User service shutdown")


@app.get("/")
def root():
    return {"message": "User service running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
