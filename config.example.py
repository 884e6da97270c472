# config.example.py

"""
Documentation-only module (safe to commit).

Configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIFT_APP_NAME": "App display name used in log lines (default: tasklift).",
    "TASKLIFT_LOG_LEVEL": "Console logging level (default: INFO).",
    "TASKLIFT_LOG_DIR": "Directory of tasklift.log (default: .local/tasklift).",
    # Source
    "TASKLIFT_SOURCE_NAME": "Name of the exporting service (default: wunderlist).",
    "TASKLIFT_FALLBACK_NAMESPACE_TEMPLATE": (
        "Name of the namespace collecting lists no folder owns; {source} is replaced "
        "(default: Migrated from {source})."
    ),
    "TASKLIFT_STRICT_REFERENCES": (
        "Fail on ids pointing at missing records (true) or skip them with a warning (false)."
    ),
    # Attachment downloads
    "TASKLIFT_FETCH_CONCURRENCY": "Max parallel attachment downloads (default: 4).",
    "TASKLIFT_FETCH_TIMEOUT_SECONDS": "httpx timeout per download (default: 30).",
    "TASKLIFT_USER_AGENT": "User-Agent header for downloads (default: tasklift/<version>).",
    # Run supervisor
    "TASKLIFT_MAX_ATTEMPTS": "Whole-run attempts when a download fails (default: 1, no retry).",
    "TASKLIFT_RETRY_DELAY_SECONDS": "Pause between attempts (default: 5).",
}
