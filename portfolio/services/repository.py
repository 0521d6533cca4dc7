"""
Repository

The only module that talks to the database. One function per read/write
operation; every function either returns model instances or raises
`RecordNotFound` / `StoreError`.

update_* and delete_* are single statements keyed on the id and are silent
no-ops when the id does not exist.
"""

import logging

from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError

from portfolio.errors import RecordNotFound, StoreError
from portfolio.extensions import db
from portfolio.models import Experience, Project, TechStack, ContactMessage, SiteConfig
from portfolio.utils import utcnow

logger = logging.getLogger(__name__)

EXPERIENCE_FIELDS = ('company', 'role', 'period', 'description', 'sort_order')
PROJECT_FIELDS = ('title', 'description', 'tech_used', 'link', 'github_url', 'image_url', 'sort_order')
TECH_STACK_FIELDS = ('category', 'name', 'description', 'sort_order')


def _store_error(action, exc):
    db.session.rollback()
    return StoreError(f'could not {action}: {exc}')


def _list_all(model):
    try:
        return model.query.order_by(model.sort_order.asc(), model.id.asc()).all()
    except SQLAlchemyError as e:
        raise _store_error(f'list {model.__tablename__}', e) from e


def _get_by_id(model, record_id):
    try:
        record = db.session.get(model, record_id)
    except SQLAlchemyError as e:
        raise _store_error(f'load {model.__name__} {record_id}', e) from e
    if record is None:
        raise RecordNotFound(model.__name__, record_id)
    return record


def _create(record):
    now = utcnow()
    record.created_at = now
    if hasattr(record, 'updated_at'):
        record.updated_at = now
    try:
        db.session.add(record)
        db.session.commit()
    except SQLAlchemyError as e:
        raise _store_error(f'create {type(record).__name__}', e) from e
    logger.debug('Created %r', record)
    return record


def _update(record, fields):
    values = {name: getattr(record, name) for name in fields}
    values['updated_at'] = utcnow()
    model = type(record)
    try:
        model.query.filter_by(id=record.id).update(values)
        db.session.commit()
    except SQLAlchemyError as e:
        raise _store_error(f'update {model.__name__} {record.id}', e) from e


def _delete(model, record_id):
    try:
        model.query.filter_by(id=record_id).delete()
        db.session.commit()
    except SQLAlchemyError as e:
        raise _store_error(f'delete {model.__name__} {record_id}', e) from e


# -----------------------------------------------------------------------------
# Site config
# -----------------------------------------------------------------------------

def get_all_config():
    """Return the site config as a plain ``{key: value}`` dict."""
    try:
        rows = SiteConfig.query.all()
    except SQLAlchemyError as e:
        raise _store_error('load site config', e) from e
    return {row.key: row.value for row in rows}


def update_config(key, value):
    """Insert or replace the value stored under `key`."""
    now = utcnow()
    stmt = sqlite_insert(SiteConfig).values(key=key, value=value, updated_at=now)
    stmt = stmt.on_conflict_do_update(
        index_elements=[SiteConfig.key],
        set_={'value': value, 'updated_at': now},
    )
    try:
        db.session.execute(stmt)
        db.session.commit()
    except SQLAlchemyError as e:
        raise _store_error(f'update config {key}', e) from e


# -----------------------------------------------------------------------------
# Experiences
# -----------------------------------------------------------------------------

def get_all_experiences():
    return _list_all(Experience)


def get_experience(experience_id):
    return _get_by_id(Experience, experience_id)


def create_experience(experience):
    return _create(experience)


def update_experience(experience):
    _update(experience, EXPERIENCE_FIELDS)


def delete_experience(experience_id):
    _delete(Experience, experience_id)


# -----------------------------------------------------------------------------
# Projects
# -----------------------------------------------------------------------------

def get_all_projects():
    return _list_all(Project)


def get_project(project_id):
    return _get_by_id(Project, project_id)


def create_project(project):
    return _create(project)


def update_project(project):
    _update(project, PROJECT_FIELDS)


def delete_project(project_id):
    _delete(Project, project_id)


# -----------------------------------------------------------------------------
# Tech stacks
# -----------------------------------------------------------------------------

def get_all_tech_stacks():
    return _list_all(TechStack)


def get_tech_stack(tech_stack_id):
    return _get_by_id(TechStack, tech_stack_id)


def create_tech_stack(tech_stack):
    return _create(tech_stack)


def update_tech_stack(tech_stack):
    _update(tech_stack, TECH_STACK_FIELDS)


def delete_tech_stack(tech_stack_id):
    _delete(TechStack, tech_stack_id)


# -----------------------------------------------------------------------------
# Contact messages
# -----------------------------------------------------------------------------

def get_all_contact_messages():
    """All messages, newest first."""
    try:
        return ContactMessage.query.order_by(
            ContactMessage.created_at.desc(), ContactMessage.id.desc()
        ).all()
    except SQLAlchemyError as e:
        raise _store_error('list contact messages', e) from e


def create_contact_message(message):
    message.is_read = False
    return _create(message)


def mark_message_as_read(message_id):
    try:
        ContactMessage.query.filter_by(id=message_id).update({'is_read': True})
        db.session.commit()
    except SQLAlchemyError as e:
        raise _store_error(f'mark message {message_id} as read', e) from e


def delete_contact_message(message_id):
    _delete(ContactMessage, message_id)
