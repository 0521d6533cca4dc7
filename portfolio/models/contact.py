"""
Contact Message and Site Config Models
"""

from portfolio.extensions import db
from portfolio.utils import utcnow


class ContactMessage(db.Model):
    """Message left by a visitor through the contact form"""
    __tablename__ = 'contact_messages'
    __table_args__ = {'sqlite_autoincrement': True}

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    message = db.Column(db.Text, nullable=False)
    is_read = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=utcnow, index=True)

    def __repr__(self):
        return f'<ContactMessage {self.id} from {self.email}>'


class SiteConfig(db.Model):
    """Key-value site settings (name, tagline, about, ...)"""
    __tablename__ = 'site_config'

    key = db.Column(db.String(100), primary_key=True)
    value = db.Column(db.Text, nullable=False, default='')
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow)

    def __repr__(self):
        return f'<SiteConfig {self.key}>'
