# gunicorn -c gunicorn.conf.py wsgi:app
from ocr_translate_service.settings import settings

bind = f"0.0.0.0:{settings.OCR_TRANSLATE_SERVICE_PORT}"
workers = settings.OCR_TRANSLATE_SERVICE_WORKERS
worker_class = "sync"

# no local timeout on oracle calls, a slow model answer must not get the worker killed
timeout = 0
graceful_timeout = 30

loglevel = "debug" if settings.DEBUG_MODE else "info"
accesslog = "-"
errorlog = "-"
