"""ASGI entrypoint: `uvicorn app:app`, or gunicorn with `gunicorn.conf.py`.

The application itself lives in `src.api`; this module only gives servers and
buildpacks a well-known place to find it.
"""

from src.api import app

__all__ = ["app"]
