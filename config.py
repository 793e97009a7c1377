import os

import dotenv

dotenv.load_dotenv()

XLSX_LOG_LEVEL: str = os.getenv("XLSX_LOG_LEVEL", "INFO").upper()

# Bytes handed to the pull parser per feed() call.
XLSX_READ_CHUNK_SIZE: int = int(os.getenv("XLSX_READ_CHUNK_SIZE", "65536"))

XLSX_LOAD_IMAGES: bool = os.getenv("XLSX_LOAD_IMAGES", "true").lower() in ("1", "true", "yes")
