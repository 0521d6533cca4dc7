"""
Admin Blueprint

Admin authentication uses a server-side session store keyed by an opaque
cookie token, checked against a single configured credential pair.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from portfolio.admin import routes  # noqa: E402, F401
