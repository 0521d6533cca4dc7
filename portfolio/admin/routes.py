"""
Admin Routes

Login/logout, the dashboard, and the form-based CRUD endpoints. Every write
endpoint redirects back to the dashboard with a ``success`` or ``error``
query-string flash message.
"""

import logging

from flask import current_app, g, redirect, render_template, request, url_for

from portfolio.admin import admin_bp
from portfolio.admin.decorators import admin_required, get_session_store
from portfolio.errors import AuthenticationError, PortfolioError
from portfolio.models import Experience, Project, TechStack
from portfolio.services import content

logger = logging.getLogger(__name__)

# Site-config keys editable from the dashboard
CONFIG_KEYS = ('name', 'tagline', 'about', 'email', 'github', 'linkedin', 'photo_url')


def _done(message):
    return redirect(url_for('admin.dashboard', success=message))


def _failed(message):
    return redirect(url_for('admin.dashboard', error=message))


def _form_int(name, default=0):
    try:
        return int(request.form.get(name, default))
    except (TypeError, ValueError):
        return default


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------

@admin_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login page, checked against the configured credential pair."""
    cookie_name = current_app.config['ADMIN_SESSION_COOKIE']

    if request.method == 'GET':
        token = request.cookies.get(cookie_name)
        if token:
            try:
                get_session_store().validate(token)
                return redirect(url_for('admin.dashboard'))
            except AuthenticationError:
                pass
        return render_template('admin/login.html')

    username = request.form.get('username', '')
    password = request.form.get('password', '')

    if not username or not password:
        return render_template('admin/login.html',
                             error='Please enter both username and password.'), 400

    if username != current_app.config['ADMIN_USERNAME'] or password != current_app.config['ADMIN_PASSWORD']:
        logger.warning('Failed admin login attempt for %r from %s', username, request.remote_addr)
        return render_template('admin/login.html',
                             error='Invalid username or password.'), 401

    store = get_session_store()
    token = store.create(username)
    response = redirect(url_for('admin.dashboard'))
    response.set_cookie(
        cookie_name,
        token,
        max_age=int(store.ttl.total_seconds()),
        path='/',
        httponly=True,
        secure=current_app.config['APP_MODE'] == 'production',
        samesite='Lax',
    )
    return response


@admin_bp.route('/logout', methods=['POST'])
@admin_required
def logout():
    """Destroy the admin session and clear the cookie."""
    cookie_name = current_app.config['ADMIN_SESSION_COOKIE']
    token = request.cookies.get(cookie_name)
    if token:
        get_session_store().destroy(token)
    logger.info('Admin %s logged out', g.admin_username)

    response = redirect(url_for('admin.login'))
    response.delete_cookie(cookie_name, path='/')
    return response


# -----------------------------------------------------------------------------
# Dashboard
# -----------------------------------------------------------------------------

@admin_bp.route('')
@admin_required
def dashboard():
    """Admin dashboard with every table the panel can edit."""
    error = request.args.get('error')
    try:
        experiences = content.get_all_experiences()
        projects = content.get_all_projects()
        tech_stacks = content.get_all_tech_stacks()
        messages = content.get_all_contact_messages()
        site_config = content.get_all_config()
    except PortfolioError:
        logger.exception('Could not load dashboard data')
        experiences, projects, tech_stacks, messages, site_config = [], [], [], [], {}
        error = error or 'Could not load data from the database.'

    return render_template('admin/dashboard.html',
                         experiences=experiences,
                         projects=projects,
                         tech_stacks=tech_stacks,
                         messages=messages,
                         unread_count=sum(1 for m in messages if not m.is_read),
                         site_config=site_config,
                         config_keys=CONFIG_KEYS,
                         username=g.admin_username,
                         success=request.args.get('success'),
                         error=error)


# -----------------------------------------------------------------------------
# Experiences
# -----------------------------------------------------------------------------

def _experience_from_form(experience_id=None):
    return Experience(
        id=experience_id,
        company=request.form.get('company', ''),
        role=request.form.get('role', ''),
        period=request.form.get('period', ''),
        description=request.form.get('description', ''),
        sort_order=_form_int('sort_order'),
    )


@admin_bp.route('/experience', methods=['POST'])
@admin_required
def create_experience():
    try:
        content.create_experience(_experience_from_form())
    except PortfolioError:
        logger.exception('Could not create experience')
        return _failed('Could not add experience.')
    return _done('Experience added.')


@admin_bp.route('/experience/<int:experience_id>', methods=['POST'])
@admin_required
def update_experience(experience_id):
    try:
        content.update_experience(_experience_from_form(experience_id))
    except PortfolioError:
        logger.exception('Could not update experience %s', experience_id)
        return _failed('Could not update experience.')
    return _done('Experience updated.')


@admin_bp.route('/experience/<int:experience_id>/delete', methods=['POST'])
@admin_required
def delete_experience(experience_id):
    try:
        content.delete_experience(experience_id)
    except PortfolioError:
        logger.exception('Could not delete experience %s', experience_id)
        return _failed('Could not delete experience.')
    return _done('Experience deleted.')


# -----------------------------------------------------------------------------
# Projects
# -----------------------------------------------------------------------------

def _project_from_form(project_id=None):
    return Project(
        id=project_id,
        title=request.form.get('title', ''),
        description=request.form.get('description', ''),
        tech_used=request.form.get('tech_used', ''),
        link=request.form.get('link', ''),
        github_url=request.form.get('github_url', ''),
        image_url=request.form.get('image_url', ''),
        sort_order=_form_int('sort_order'),
    )


@admin_bp.route('/project', methods=['POST'])
@admin_required
def create_project():
    try:
        content.create_project(_project_from_form())
    except PortfolioError:
        logger.exception('Could not create project')
        return _failed('Could not add project.')
    return _done('Project added.')


@admin_bp.route('/project/<int:project_id>', methods=['POST'])
@admin_required
def update_project(project_id):
    try:
        content.update_project(_project_from_form(project_id))
    except PortfolioError:
        logger.exception('Could not update project %s', project_id)
        return _failed('Could not update project.')
    return _done('Project updated.')


@admin_bp.route('/project/<int:project_id>/delete', methods=['POST'])
@admin_required
def delete_project(project_id):
    try:
        content.delete_project(project_id)
    except PortfolioError:
        logger.exception('Could not delete project %s', project_id)
        return _failed('Could not delete project.')
    return _done('Project deleted.')


# -----------------------------------------------------------------------------
# Tech stacks
# -----------------------------------------------------------------------------

def _tech_stack_from_form(tech_stack_id=None):
    return TechStack(
        id=tech_stack_id,
        category=request.form.get('category', ''),
        name=request.form.get('name', ''),
        description=request.form.get('description', ''),
        sort_order=_form_int('sort_order'),
    )


@admin_bp.route('/techstack', methods=['POST'])
@admin_required
def create_tech_stack():
    try:
        content.create_tech_stack(_tech_stack_from_form())
    except PortfolioError:
        logger.exception('Could not create tech stack')
        return _failed('Could not add tech stack.')
    return _done('Tech stack added.')


@admin_bp.route('/techstack/<int:tech_stack_id>', methods=['POST'])
@admin_required
def update_tech_stack(tech_stack_id):
    try:
        content.update_tech_stack(_tech_stack_from_form(tech_stack_id))
    except PortfolioError:
        logger.exception('Could not update tech stack %s', tech_stack_id)
        return _failed('Could not update tech stack.')
    return _done('Tech stack updated.')


@admin_bp.route('/techstack/<int:tech_stack_id>/delete', methods=['POST'])
@admin_required
def delete_tech_stack(tech_stack_id):
    try:
        content.delete_tech_stack(tech_stack_id)
    except PortfolioError:
        logger.exception('Could not delete tech stack %s', tech_stack_id)
        return _failed('Could not delete tech stack.')
    return _done('Tech stack deleted.')


# -----------------------------------------------------------------------------
# Site config
# -----------------------------------------------------------------------------

@admin_bp.route('/config', methods=['POST'])
@admin_required
def update_config():
    """Upsert the allow-listed config keys; blank fields keep their old value."""
    try:
        for key in CONFIG_KEYS:
            content.update_config(key, request.form.get(key, ''))
    except PortfolioError:
        logger.exception('Could not update site config')
        return _failed('Could not update site settings.')
    return _done('Site settings updated.')


# -----------------------------------------------------------------------------
# Contact messages
# -----------------------------------------------------------------------------

@admin_bp.route('/message/<int:message_id>/read', methods=['POST'])
@admin_required
def mark_message_read(message_id):
    try:
        content.mark_message_as_read(message_id)
    except PortfolioError:
        logger.exception('Could not mark message %s as read', message_id)
        return _failed('Could not update message.')
    return _done('Message marked as read.')


@admin_bp.route('/message/<int:message_id>/delete', methods=['POST'])
@admin_required
def delete_message(message_id):
    try:
        content.delete_contact_message(message_id)
    except PortfolioError:
        logger.exception('Could not delete message %s', message_id)
        return _failed('Could not delete message.')
    return _done('Message deleted.')
