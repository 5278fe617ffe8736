"""
Service context extraction for terminal logging.

Identifies which booking terminal and process produced a log line, so logs
collected from several box-office machines can be told apart.
"""

import os
import socket
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'seat-allocation')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    terminal_id = os.getenv('BOOKING_TERMINAL_ID', '')
    if not terminal_id:
        try:
            terminal_id = socket.gethostname().split('.')[0][:12]  # Short hostname for brevity
        except OSError:
            terminal_id = 'terminal'

    return f'{service_name}@{deploy_env}:{terminal_id}:{os.getpid()}'
