# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "DAYTASKS_APP_NAME": "App display name (default: daytasks).",
    "DAYTASKS_LOG_LEVEL": "Console logging level (default: INFO).",
    "DAYTASKS_LOG_TO_FILE": "Also write DEBUG logs to <data_dir>/daytasks.log (true/false).",
    # Connectors
    "DAYTASKS_CONSOLE_ENABLED": "Run the console connector (true/false, default: true).",
    # Calendar
    "DAYTASKS_FIRST_WEEKDAY": "First column of the month grid: 0-6 (0 = Monday) or a day name "
    "(default: sunday).",
    "DAYTASKS_START_MONTH": "Month shown at startup as YYYY-MM (default: today's month).",
    # Paths (gitignored)
    "DAYTASKS_DATA_DIR": "Local data directory for logs (default: .local/daytasks).",
}
