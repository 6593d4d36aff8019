SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
STORAGE_PATH = ""

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "attendance_tracker_test",
}

MIN_PASSWORD_LENGTH = 6

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
