"""
Pages Services

View-model shaping and form validation for the public page.
"""

import re

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')

NAME_MIN, NAME_MAX = 2, 100
MESSAGE_MIN, MESSAGE_MAX = 10, 2000
EMAIL_MAX = 255


def group_tech_by_category(tech_stacks):
    """Group tech stacks into ``{category: [{'name', 'description'}, ...]}``.

    Categories appear in the order of their first entry; entries keep their
    sort order inside each category.
    """
    grouped = {}
    for ts in tech_stacks:
        grouped.setdefault(ts.category, []).append({
            'name': ts.name,
            'description': ts.description,
        })
    return grouped


def validate_contact_form(data):
    """Validate a contact submission.

    Returns ``(cleaned, errors)``: `cleaned` holds the trimmed name, email and
    message; `errors` maps field name to a message and is empty when valid.
    """
    name = str(data.get('name') or '').strip()
    email = str(data.get('email') or '').strip()
    message = str(data.get('message') or '').strip()

    errors = {}
    if not NAME_MIN <= len(name) <= NAME_MAX:
        errors['name'] = f'Name must be between {NAME_MIN} and {NAME_MAX} characters.'
    if len(email) > EMAIL_MAX or not EMAIL_RE.match(email):
        errors['email'] = 'Please provide a valid email address.'
    if not MESSAGE_MIN <= len(message) <= MESSAGE_MAX:
        errors['message'] = f'Message must be between {MESSAGE_MIN} and {MESSAGE_MAX} characters.'

    return {'name': name, 'email': email, 'message': message}, errors
