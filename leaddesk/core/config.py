import os

# Logging
LOG_LEVEL = os.getenv("LEADDESK_LOG_LEVEL", "INFO").upper()

# Demo leads are loaded on startup unless disabled
SEED_DEMO = os.getenv("LEADDESK_SEED_DEMO", "1") not in ("0", "false", "False")

# Prefix used when building wa.me links from a local phone number
WHATSAPP_COUNTRY_CODE = os.getenv("LEADDESK_WHATSAPP_COUNTRY_CODE", "55")

_DEFAULT_ORIGINS = "http://localhost:5173,http://127.0.0.1:5173,http://localhost:3000"
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("LEADDESK_CORS_ORIGINS", _DEFAULT_ORIGINS).split(",")
    if o.strip()
]
