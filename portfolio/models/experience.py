"""
Experience Model
"""

from portfolio.extensions import db
from portfolio.utils import utcnow


class Experience(db.Model):
    """Work experience entry shown on the timeline"""
    __tablename__ = 'experiences'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    company = db.Column(db.String(200), nullable=False, default='')
    role = db.Column(db.String(200), nullable=False, default='')
    period = db.Column(db.String(100), nullable=False, default='')
    description = db.Column(db.Text, nullable=False, default='')
    sort_order = db.Column(db.Integer, nullable=False, default=0)
    created_at = db.Column(db.DateTime, default=utcnow)
    updated_at = db.Column(db.DateTime, default=utcnow)

    def __repr__(self):
        return f'<Experience {self.role} @ {self.company}>'
