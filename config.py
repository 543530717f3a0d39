import os
from dotenv import load_dotenv

load_dotenv() # Load variables from the .env file

DEFAULT_SECRET_KEY = 'jobboard-default-secret-change-me'


def _env_flag(name, default=False):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _database_uri():
    if os.getenv('DATABASE_URL'):
        return os.getenv('DATABASE_URL')

    db_host = os.getenv('DB_HOST')
    if db_host:
        db_user = os.getenv('DB_USER')
        db_password = os.getenv('DB_PASSWORD')
        db_name = os.getenv('DB_NAME', 'job_portal')
        # MySQL connection string (using PyMySQL driver)
        return (
            f"mysql+pymysql://{db_user}@{db_host}/{db_name}"
            if not db_password else
            f"mysql+pymysql://{db_user}:{db_password}@{db_host}/{db_name}"
        )

    return 'sqlite:///jobboard.db'


class Config:
    ENV_NAME = os.getenv('FLASK_ENV', 'production')
    TESTING = False

    SECRET_KEY = os.getenv('SECRET_KEY', DEFAULT_SECRET_KEY)
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', SECRET_KEY)
    JWT_EXPIRES_HOURS = int(os.getenv('JWT_EXPIRES_HOURS', '3'))

    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False  # disables overhead warning

    PORT = int(os.getenv('PORT', '5003'))
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', 'http://localhost:5173,http://localhost:3000').split(',')

    # raw error text in 500 responses
    EXPOSE_ERROR_DETAILS = _env_flag('EXPOSE_ERROR_DETAILS', ENV_NAME == 'development')

    # "permissive" or "strict", see jobboard.services.status_machine
    APPLICATION_STATUS_POLICY = os.getenv('APPLICATION_STATUS_POLICY', 'permissive')
    # "orphan" or "cascade", see jobboard.services.job_catalog.delete_job
    JOB_DELETE_POLICY = os.getenv('JOB_DELETE_POLICY', 'orphan')

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    ENV_NAME = 'testing'
    TESTING = True

    SECRET_KEY = 'test-secret-key-with-enough-length-for-hs256'
    JWT_SECRET_KEY = SECRET_KEY
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    BCRYPT_LOG_ROUNDS = 4

    EXPOSE_ERROR_DETAILS = True
    APPLICATION_STATUS_POLICY = 'permissive'
    JOB_DELETE_POLICY = 'orphan'
    LOG_LEVEL = 'DEBUG'
