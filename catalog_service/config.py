import os
from dotenv import load_dotenv

load_dotenv() # Load .env file from project root if running locally

# For Uvicorn binding
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8003"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
