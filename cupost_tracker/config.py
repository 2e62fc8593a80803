import os

from dotenv import load_dotenv

load_dotenv()

# CU post (CU편의점택배)
CARRIER_ID = "kr.cupost"
CARRIER_TIMEZONE = "Asia/Seoul"
CARRIER_COUNTRY_CODE = "KR"
CUPOST_TRACKING_URL = os.getenv(
    "CUPOST_TRACKING_URL",
    "https://www.cupost.co.kr/postbox/delivery/allResult.cupost",
)

# Request Settings
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", "15"))
MAX_RETRIES = int(os.getenv("MAX_RETRIES", "3"))
BASE_RETRY_DELAY = float(os.getenv("BASE_RETRY_DELAY", "1.0"))
MAX_RETRY_DELAY = float(os.getenv("MAX_RETRY_DELAY", "60.0"))
USER_AGENT = os.getenv(
    "USER_AGENT",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0 Safari/537.36",
)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", ".logs")
LOG_FILE_ENABLED = os.getenv("LOG_FILE_ENABLED", "false").lower() == "true"
