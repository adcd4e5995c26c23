import os

from dotenv import load_dotenv

# Load .env from the working directory so local MONGO_URI is picked up
load_dotenv()


class Config:
    MONGO_URI = os.environ.get(
        "MONGO_URI",
        os.environ.get("MONGODB_URI", "mongodb://localhost:27017/?directConnection=true"),
    )
    MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "taskboard")

    FRONTEND_DIR = os.environ.get(
        "FRONTEND_DIR", os.path.join(os.path.dirname(__file__), "frontend")
    )
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    DEBUG = os.environ.get("FLASK_DEBUG", "0") == "1"
