import os

from dotenv import load_dotenv

# Load .env file with explicit UTF-8 encoding
load_dotenv(encoding="utf-8")


def _int_env(name: str, default: int) -> int:
    return int(os.getenv(name) or str(default))


LOG_LEVEL = (os.getenv("LOG_LEVEL") or "INFO").upper()

# Voucher generation
VOUCHER_BATCH_SIZE = _int_env("VOUCHER_BATCH_SIZE", 5000)
MAX_VOUCHERS_PER_REQUEST = _int_env("MAX_VOUCHERS_PER_REQUEST", 100_000)
MAX_CODE_ATTEMPTS = _int_env("MAX_CODE_ATTEMPTS", 1000)

# HTTP
CORS_ORIGINS = [
    origin.strip()
    for origin in (
        os.getenv("CORS_ORIGINS")
        or "http://localhost:3000,https://localhost:3000,http://127.0.0.1:3000,https://127.0.0.1:3000"
    ).split(",")
    if origin.strip()
]
HOST = os.getenv("HOST") or "127.0.0.1"
PORT = _int_env("PORT", 4000)
