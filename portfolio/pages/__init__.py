"""
Pages Blueprint

Public portfolio page and the contact-form API.
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__)

from portfolio.pages import routes  # noqa: E402, F401
