"""
Portfolio Site - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, render_template
from sqlalchemy import text

from portfolio.extensions import db
from portfolio.config import Config
from portfolio.services.sessions import SessionStore
from portfolio.utils import split_csv

logger = logging.getLogger(__name__)

# Templates that must exist before the app may serve requests
REQUIRED_TEMPLATES = (
    'pages/index.html',
    'admin/login.html',
    'admin/dashboard.html',
    'errors/500.html',
)

# Written once, on a fresh database
DEFAULT_SITE_CONFIG = {
    'name': 'Your Name',
    'tagline': 'Software Engineer',
}


def create_app(config_class=Config, session_store=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        session_store: SessionStore for admin logins; a fresh one with the
            configured TTL is created when omitted

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)

    # Initialize extensions
    db.init_app(app)
    if session_store is None:
        session_store = SessionStore(ttl=app.config['ADMIN_SESSION_TTL'])
    app.extensions['session_store'] = session_store

    # Register blueprints
    from portfolio.pages import pages_bp
    from portfolio.admin import admin_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')

    app.add_template_filter(split_csv, 'split_csv')

    @app.errorhandler(500)
    def internal_error(error):
        return render_template('errors/500.html'), 500

    # Fail at startup rather than on the first request
    for name in REQUIRED_TEMPLATES:
        app.jinja_env.get_template(name)

    # Create database tables
    db_path = app.config.get('DB_PATH')
    if db_path:
        os.makedirs(os.path.dirname(db_path), exist_ok=True)

    with app.app_context():
        from portfolio import models  # noqa: F401
        db.create_all()
        _ensure_schema()
        _ensure_default_data()

    logger.info('Portfolio app ready (mode=%s)', app.config['APP_MODE'])
    return app


def _configure_logging(app):
    level = logging.DEBUG if app.config.get('DEBUG') else logging.INFO
    logging.getLogger('portfolio').setLevel(level)
    if not logging.getLogger().handlers:
        logging.basicConfig(format='%(asctime)s %(levelname)s %(name)s: %(message)s')


def _ensure_schema():
    """Additive column migrations for databases created by older versions."""
    with db.engine.begin() as conn:
        cols = [r[1] for r in conn.execute(text("PRAGMA table_info('projects');")).fetchall()]
        if 'github_url' not in cols:
            conn.execute(text("ALTER TABLE projects ADD COLUMN github_url TEXT NOT NULL DEFAULT '';"))
            logger.info('Added github_url column to projects table')


def _ensure_default_data():
    """Seed the site config on an empty database."""
    from portfolio.models import SiteConfig

    if SiteConfig.query.first() is not None:
        return
    for key, value in DEFAULT_SITE_CONFIG.items():
        db.session.add(SiteConfig(key=key, value=value))
    db.session.commit()
    logger.info('Seeded default site config')
