"""
Models Package

Exports all models for easy importing.
"""

from portfolio.models.experience import Experience
from portfolio.models.project import Project
from portfolio.models.tech_stack import TechStack
from portfolio.models.contact import ContactMessage, SiteConfig

__all__ = ['Experience', 'Project', 'TechStack', 'ContactMessage', 'SiteConfig']
