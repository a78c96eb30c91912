import os


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'your-secret-key-here-make-it-long'
    # Relative SQLite paths land in the app's instance folder
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///marketplace.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # 'not_found' answers 404 for an empty listing, 'empty' answers []
    EMPTY_RESULT_POLICY = os.environ.get('EMPTY_RESULT_POLICY', 'not_found')

    BEST_CLIENTS_DEFAULT_LIMIT = int(os.environ.get('BEST_CLIENTS_DEFAULT_LIMIT', 2))


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    LOG_LEVEL = 'WARNING'
    EMPTY_RESULT_POLICY = 'not_found'
    BEST_CLIENTS_DEFAULT_LIMIT = 2
