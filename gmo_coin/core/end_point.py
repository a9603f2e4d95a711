import os

# Read once at import; treated as immutable for the life of the process.
PUBLIC_ENDPOINT = os.getenv("GMO_COIN_PUBLIC_ENDPOINT", "https://api.coin.z.com/public").rstrip("/")

HTTP_TIMEOUT_SECONDS = float(os.getenv("GMO_COIN_HTTP_TIMEOUT", "10"))
