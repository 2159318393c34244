# server/config.py

import os
from dotenv import load_dotenv


load_dotenv()


PORT = int(os.getenv("PORT") or 3000)
HOST = os.getenv("HOST", "0.0.0.0")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DB_FILE = os.getenv("DB_FILE", "./users.db")
DATABASE_URL = f"sqlite:///{DB_FILE}"
