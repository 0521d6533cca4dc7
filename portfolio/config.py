"""
Configuration settings for the portfolio site
"""
import os
from datetime import timedelta


class Config:
    """Flask application configuration"""

    # Application mode: 'development' enables debug and verbose logging
    APP_MODE = os.environ.get('APP_MODE') or 'development'
    DEBUG = APP_MODE != 'production'

    PORT = int(os.environ.get('PORT') or 8080)

    # Flask secret key (admin sessions are tracked server-side, not signed)
    SECRET_KEY = os.environ.get('SESSION_SECRET') or 'default-secret-change-me'

    # Database configuration
    DB_PATH = os.path.abspath(os.environ.get('DB_PATH') or os.path.join('data', 'portfolio.db'))
    SQLALCHEMY_DATABASE_URI = 'sqlite:///' + DB_PATH
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'connect_args': {'timeout': 5}}

    # Admin credentials (single shared operator account)
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'changeme'

    # Admin session cookie
    ADMIN_SESSION_COOKIE = 'admin_session'
    ADMIN_SESSION_TTL = timedelta(hours=24)


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    DEBUG = False
    DB_PATH = None
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'secret-pass'
