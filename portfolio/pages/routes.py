"""
Pages Routes

Public portfolio page and the asynchronous contact-form endpoint.
"""

import logging

from flask import render_template, request, jsonify

from portfolio.errors import PortfolioError
from portfolio.pages import pages_bp
from portfolio.pages.services import group_tech_by_category, validate_contact_form
from portfolio.services import content

logger = logging.getLogger(__name__)


@pages_bp.route('/')
def index():
    """Public portfolio page"""
    try:
        data = content.get_portfolio_data()
    except PortfolioError:
        logger.exception('Could not load portfolio data')
        return render_template('errors/500.html'), 500

    return render_template('pages/index.html',
                         site_config=data.config,
                         experiences=data.experiences,
                         projects=data.projects,
                         tech_by_category=group_tech_by_category(data.tech_stacks))


@pages_bp.route('/api/contact', methods=['POST'])
def submit_contact():
    """Store a contact-form message; always answers with a JSON envelope."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = request.form

    cleaned, errors = validate_contact_form(payload)
    if errors:
        return jsonify(success=False,
                       message='Invalid data. Please check every field and try again.',
                       errors=errors), 400

    try:
        content.submit_contact_message(**cleaned)
    except PortfolioError:
        logger.exception('Could not store contact message')
        return jsonify(success=False,
                       message='Your message could not be sent. Please try again later.'), 500

    logger.info('Contact message received from %s', cleaned['email'])
    return jsonify(success=True,
                   message='Message sent! Thanks for getting in touch.')
