# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting without opening src/taskpal/config.py.
"""

ENV_VARS = {
    # App / logging
    "TASKPAL_APP_NAME": "Name used in the greeting and logs (default: taskpal).",
    "TASKPAL_LOG_LEVEL": "Console logging level (default: WARNING).",
    "TASKPAL_LOG_TO_FILE": "Also write DEBUG logs to <data dir>/taskpal.log (true/false, default: true).",
    # Paths
    "TASKPAL_DATA_DIR": "Local data directory (default: .local/taskpal).",
    "TASKPAL_TASKS_PATH": "Task file (default: <data dir>/tasks.txt).",
}
