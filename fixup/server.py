# fixup/server.py
import uvicorn

from fixup.core.config import settings


def _run(app_path: str):
    uvicorn.run(app_path, host=settings.http.host, port=settings.http.port, timeout_graceful_shutdown=10)


def run_catalog():
    _run("fixup.catalog_main:app")


def run_user():
    _run("fixup.user_main:app")


def run_chat():
    _run("fixup.chat_main:app")
