"""
Services Package

Exports all services for easy importing.
"""

from portfolio.services.sanitize import sanitize_input
from portfolio.services.sessions import SessionStore, Session
from portfolio.services import repository, content

__all__ = [
    'sanitize_input',
    'SessionStore',
    'Session',
    'repository',
    'content',
]
