# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TASKVIEW_APP_NAME": "App display name (default: taskview).",
    "TASKVIEW_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Remote task API
    "TASKVIEW_API_BASE_URL": "Base URL of the /tasks API (default: http://localhost:8000/api).",
    "VITE_API_BASE_URL": "Fallback for TASKVIEW_API_BASE_URL, so a frontend .env can be reused.",
    "TASKVIEW_CONNECT_TIMEOUT_SECONDS": "HTTP connect timeout (default: 5).",
    "TASKVIEW_READ_TIMEOUT_SECONDS": "HTTP read timeout (default: 15).",
    # Console
    "TASKVIEW_COLOR": "Colour priority/status cells (true/false, default: true). NO_COLOR disables.",
    # Paths (gitignored)
    "TASKVIEW_DATA_DIR": "Local data directory for taskview.log (default: .local/taskview).",
}
