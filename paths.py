import os

# Firebase Admin SDK JSON file path
FIREBASE_ADMIN_SDK_PATH = os.path.join(os.path.dirname(__file__), "serviceAccountKey.json")

# Default SQLite database file, used when DATABASE_URL is not set
DEFAULT_SQLITE_PATH = os.path.join(os.path.dirname(__file__), "safetrace.db")

# Local .env file read by the settings loader
ENV_FILE_PATH = os.path.join(os.path.dirname(__file__), ".env")
