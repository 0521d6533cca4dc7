"""
Admin Decorator
"""

import logging
from functools import wraps

from flask import current_app, g, redirect, request, url_for

from portfolio.errors import AuthenticationError

logger = logging.getLogger(__name__)


def get_session_store():
    """The SessionStore created (or injected) by `create_app`."""
    return current_app.extensions['session_store']


def admin_required(f):
    """Decorator to ensure the request carries a valid admin session.

    - Reads the token from the admin session cookie
    - Missing, unknown or expired tokens redirect to /admin/login
    - On success the username is available as ``g.admin_username``
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        token = request.cookies.get(current_app.config['ADMIN_SESSION_COOKIE'])
        if not token:
            return redirect(url_for('admin.login'))
        try:
            g.admin_username = get_session_store().validate(token)
        except AuthenticationError as e:
            logger.debug('Rejected admin request to %s: %s', request.path, e)
            return redirect(url_for('admin.login'))
        return f(*args, **kwargs)
    return wrapper
