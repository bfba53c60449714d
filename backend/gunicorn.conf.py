# Entry point: gunicorn -c backend/gunicorn.conf.py "greeter:create_app()"

# Bind & workers
bind = "0.0.0.0:8000"
# The user store lives in process memory: one worker, concurrency via threads
workers = 1
threads = 8
timeout = 60
graceful_timeout = 30
keepalive = 5

# Logs to stdout/stderr (collected by Docker)
accesslog = "-"
errorlog = "-"
loglevel = "info"

# Trust proxy headers
forwarded_allow_ips = "*"
proxy_protocol = False
