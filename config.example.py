# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Every variable is optional.
"""

ENV_VARS = {
    # App / logging
    "TASK_KEEPER_APP_NAME": "App display name used in logs (default: task-keeper).",
    "TASK_KEEPER_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASK_KEEPER_LOG_FILE": "Write a full DEBUG log to this path (default: no log file).",
    # Overdue monitor
    "TASK_KEEPER_MONITOR_ENABLED": "Run the background overdue monitor (true/false, default: true).",
    "TASK_KEEPER_MONITOR_INTERVAL": "Seconds between overdue scans (default: 10).",
}
