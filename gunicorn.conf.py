import os

bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# The formatter keeps no per-process state beyond the static policy table, so a
# couple of async workers is plenty for a small host.
workers = int(os.environ.get("WEB_CONCURRENCY", "2") or 2)
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30") or 30)
worker_class = os.environ.get("GUNICORN_WORKER_CLASS", "uvicorn.workers.UvicornWorker")
wsgi_app = "app:app"
