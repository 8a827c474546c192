# Gunicorn configuration for the QDS API
# Run with: gunicorn -c gunicorn.conf.py

wsgi_app = "qds.main:app"

# Bind to the port provided by the host
bind = "0.0.0.0:10000"

# Analytics counters and sessions live in the database, so workers can scale
workers = 2

# FastAPI is ASGI; gunicorn manages uvicorn workers
worker_class = "uvicorn.workers.UvicornWorker"

timeout = 60

# Graceful timeout
graceful_timeout = 30

# Keep alive
keepalive = 5

# Log level
loglevel = "info"

# Access log
accesslog = "-"

# Error log
errorlog = "-"
