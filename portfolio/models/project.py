"""
Project Model
"""

from portfolio.extensions import db
from portfolio.utils import utcnow, split_csv


class Project(db.Model):
    """Portfolio project card"""
    __tablename__ = 'projects'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, default='')
    description = db.Column(db.Text, nullable=False, default='')
    tech_used = db.Column(db.String(500), nullable=False, default='')  # comma-joined
    link = db.Column(db.String(500), nullable=False, default='')
    github_url = db.Column(db.String(500), nullable=False, default='')
    image_url = db.Column(db.String(500), nullable=False, default='')
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    @property
    def tech_list(self):
        return split_csv(self.tech_used)

    def __repr__(self):
        return f'<Project {self.title}>'
