SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
SQLALCHEMY_TRACK_MODIFICATIONS = False

USER_STORE = "sql"

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 1000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = True
