"""
Tech Stack Model
"""

from portfolio.extensions import db
from portfolio.utils import utcnow


class TechStack(db.Model):
    """A technology, described by how it is used rather than a skill level"""
    __tablename__ = 'tech_stacks'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    category = db.Column(db.String(100), nullable=False, default='')
    name = db.Column(db.String(100), nullable=False, default='')
    description = db.Column(db.Text, nullable=False, default='')
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    def __repr__(self):
        return f'<TechStack {self.category}/{self.name}>'
