"""
Content Services

Business layer between the views and the repository. Every write path runs
user-supplied text through `sanitize_input` before it reaches the database;
reads are passed through untouched. Repository errors propagate unchanged.
"""

from dataclasses import dataclass, field

from portfolio.models import ContactMessage
from portfolio.services import repository
from portfolio.services.sanitize import sanitize_input


@dataclass
class PortfolioData:
    """Everything the public page needs, read in one pass."""
    config: dict = field(default_factory=dict)
    experiences: list = field(default_factory=list)
    projects: list = field(default_factory=list)
    tech_stacks: list = field(default_factory=list)


def _sanitize_fields(record, names):
    for name in names:
        setattr(record, name, sanitize_input(getattr(record, name)))
    return record


def get_portfolio_data():
    """Load config, experiences, projects and tech stacks, in that order.

    No caching: every call re-reads all four tables. The first failure is
    raised as-is.
    """
    config = repository.get_all_config()
    experiences = repository.get_all_experiences()
    projects = repository.get_all_projects()
    tech_stacks = repository.get_all_tech_stacks()
    return PortfolioData(config=config, experiences=experiences,
                         projects=projects, tech_stacks=tech_stacks)


# -----------------------------------------------------------------------------
# Contact messages
# -----------------------------------------------------------------------------

def submit_contact_message(name, email, message):
    """Store a visitor message. Inputs are expected to be validated already."""
    msg = ContactMessage(
        name=sanitize_input(name),
        email=sanitize_input(email),
        message=sanitize_input(message),
    )
    return repository.create_contact_message(msg)


def get_all_contact_messages():
    return repository.get_all_contact_messages()


def mark_message_as_read(message_id):
    repository.mark_message_as_read(message_id)


def delete_contact_message(message_id):
    repository.delete_contact_message(message_id)


# -----------------------------------------------------------------------------
# Experiences
# -----------------------------------------------------------------------------

EXPERIENCE_TEXT = ('company', 'role', 'period', 'description')


def get_all_experiences():
    return repository.get_all_experiences()


def get_experience(experience_id):
    return repository.get_experience(experience_id)


def create_experience(experience):
    return repository.create_experience(_sanitize_fields(experience, EXPERIENCE_TEXT))


def update_experience(experience):
    repository.update_experience(_sanitize_fields(experience, EXPERIENCE_TEXT))


def delete_experience(experience_id):
    repository.delete_experience(experience_id)


# -----------------------------------------------------------------------------
# Projects
# -----------------------------------------------------------------------------

PROJECT_TEXT = ('title', 'description', 'tech_used', 'link', 'github_url', 'image_url')


def get_all_projects():
    return repository.get_all_projects()


def get_project(project_id):
    return repository.get_project(project_id)


def create_project(project):
    return repository.create_project(_sanitize_fields(project, PROJECT_TEXT))


def update_project(project):
    repository.update_project(_sanitize_fields(project, PROJECT_TEXT))


def delete_project(project_id):
    repository.delete_project(project_id)


# -----------------------------------------------------------------------------
# Tech stacks
# -----------------------------------------------------------------------------

TECH_STACK_TEXT = ('category', 'name', 'description')


def get_all_tech_stacks():
    return repository.get_all_tech_stacks()


def get_tech_stack(tech_stack_id):
    return repository.get_tech_stack(tech_stack_id)


def create_tech_stack(tech_stack):
    return repository.create_tech_stack(_sanitize_fields(tech_stack, TECH_STACK_TEXT))


def update_tech_stack(tech_stack):
    repository.update_tech_stack(_sanitize_fields(tech_stack, TECH_STACK_TEXT))


def delete_tech_stack(tech_stack_id):
    repository.delete_tech_stack(tech_stack_id)


# -----------------------------------------------------------------------------
# Site config
# -----------------------------------------------------------------------------

def get_all_config():
    return repository.get_all_config()


def update_config(key, value):
    """Upsert one config entry. Blank values are skipped, never stored.

    Returns True when a value was written.
    """
    value = sanitize_input(value)
    if not value:
        return False
    repository.update_config(sanitize_input(key), value)
    return True
