import os
from dotenv import load_dotenv

load_dotenv()

CHROME_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/58.0.3029.110 Safari/537.36"
)


def _optional_float(value):
    if value in (None, ""):
        return None
    return float(value)


class Settings:
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 3000))
    DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    UPSTREAM_BASE_URL = os.getenv("UPSTREAM_BASE_URL", "https://www.swiggy.com/dapi")
    UPSTREAM_USER_AGENT = os.getenv("UPSTREAM_USER_AGENT", CHROME_USER_AGENT)
    # None means requests waits forever
    UPSTREAM_TIMEOUT = _optional_float(os.getenv("UPSTREAM_TIMEOUT"))

settings = Settings()
