"""
Flask Routes for the collection schedule overview
"""

import logging
from flask import Blueprint, jsonify, render_template
from svoz.database import load_records

logger = logging.getLogger(__name__)

bp = Blueprint('main', __name__)


@bp.route('/')
def index():
    """Serve the main page."""
    return render_template('index.html')


@bp.route('/data')
def data():
    """Return the persisted collection records as-is."""
    return jsonify(load_records()), 200


@bp.route('/admin/trigger-update', methods=['GET', 'POST'])
def admin_trigger_update():
    """Manually trigger the collection schedule update."""
    from svoz.scheduler import trigger_update_now

    result = trigger_update_now()
    if result is None:
        return jsonify({'success': False, 'error': 'Update failed'}), 500
    return jsonify({'success': True, 'message': 'Update triggered successfully', 'result': result}), 200


@bp.route('/admin/jobs')
def admin_jobs():
    """View scheduled jobs."""
    from svoz.scheduler import get_scheduled_jobs
    return jsonify({'jobs': get_scheduled_jobs()}), 200


@bp.errorhandler(404)
def not_found(error):
    """Handle 404 errors."""
    return jsonify({'error': 'Not found'}), 404


@bp.errorhandler(500)
def server_error(error):
    """Handle 500 errors."""
    return jsonify({'error': 'Internal server error'}), 500
