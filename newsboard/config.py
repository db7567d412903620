# newsboard/config.py
import os
from dotenv import load_dotenv
load_dotenv()

DB_DSN = os.getenv("DATABASE_URL")
DB_POOL_MIN = int(os.getenv("DB_POOL_MIN", "1"))
DB_POOL_MAX = int(os.getenv("DB_POOL_MAX", "10"))
CREATE_TABLES = os.getenv("CREATE_TABLES", "true").lower() in ("1", "true", "yes")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
ROOT_PATH = os.getenv("ROOT_PATH", "")

DEFAULT_ARTICLE_IMG_URL = os.getenv(
    "DEFAULT_ARTICLE_IMG_URL",
    "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg?w=700&h=700",
)
