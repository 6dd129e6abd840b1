import os
from dotenv import load_dotenv

# Optional; a missing .env is fine
load_dotenv()


class Config:
    SECRET_KEY = os.getenv("WEEKSTRIP_SECRET_KEY", "dev-only-change-me")
    FIRST_WEEKDAY = os.getenv("WEEKSTRIP_FIRST_WEEKDAY", "sunday")
    LOG_LEVEL = os.getenv("WEEKSTRIP_LOG_LEVEL", "INFO").upper()
