import logging
import os
import time

import requests
from flask import Flask, jsonify, make_response, redirect, render_template, request, url_for

from terminus_tracker.clients.strava import authorize_url
from terminus_tracker.config import Config
from terminus_tracker.errors import TrackerError
from terminus_tracker.logger import get_logger
from terminus_tracker.presentation.formatting import ActivityFormatter
from terminus_tracker.presentation.page import (
    VIEW_PREFERENCE_COOKIE,
    VIEW_TABLE,
    load_page_state,
    render_cards,
    toggle_view,
)
from terminus_tracker.presentation.table import SortState, TableView
from terminus_tracker.services.live import LiveActivityService

logger = logging.getLogger(__name__)

USER_COOKIE = "user_id"


def create_app(testing: "bool | None" = None, live_service: "LiveActivityService | None" = None):
    """Create and configure Flask application.

    Args:
        testing: If None, auto-detect from the TESTING environment variable.
        live_service: Token store and activity cache; a fresh one by default.
    """
    app = Flask(__name__,
                template_folder='templates',
                static_folder=str(Config.STATIC_DIR),
                static_url_path='/static')

    if testing is None:
        testing = os.environ.get("TESTING", "").lower() in ("1", "true", "yes")
    app.config["TESTING"] = testing
    app.config["SECRET_KEY"] = Config.SECRET_KEY

    live = live_service or LiveActivityService()
    app.extensions["live_activities"] = live

    def _fetch_for(user_id):
        """(status, payload) as /activities would answer; fetch errors propagate."""
        if not live.is_authenticated(user_id):
            return 401, {'error': 'Not authenticated'}
        return 200, live.get_activities(user_id)

    @app.route('/')
    def index():
        """Activity page in card or table view."""
        preference = request.cookies.get(VIEW_PREFERENCE_COOKIE)
        user_id = request.cookies.get(USER_COOKIE)
        state = load_page_state(lambda: _fetch_for(user_id), preference)

        formatter = ActivityFormatter()
        cards = []
        table = None
        if state.view == VIEW_TABLE:
            sort = SortState.from_query(request.args.get('sort'), request.args.get('order'))
            table = TableView(state.activities, sort=sort, formatter=formatter).render()
        elif state.view is not None:
            cards = render_cards(state.activities, formatter)

        return render_template('index.html', state=state, cards=cards, table=table)

    @app.route('/activities', methods=['GET'])
    def activities():
        """Filtered activities for the logged-in athlete."""
        started = time.monotonic()
        user_id = request.cookies.get(USER_COOKIE)
        try:
            status, payload = _fetch_for(user_id)
        except (TrackerError, requests.RequestException) as e:
            logger.error(f"Failed to fetch activities for {user_id}: {e}")
            return jsonify({'error': 'Failed to fetch activities'}), 500

        if status != 200:
            return jsonify(payload), status

        logger.info(f"Total /activities response time: {time.monotonic() - started:.3f}s")
        return jsonify(payload)

    @app.route('/view/toggle', methods=['POST'])
    def toggle():
        """Flip between card and table view and remember the choice."""
        preference = toggle_view(request.cookies.get(VIEW_PREFERENCE_COOKIE))
        response = make_response(redirect(url_for('index')))
        response.set_cookie(VIEW_PREFERENCE_COOKIE, preference, samesite='Lax')
        return response

    @app.route('/login')
    def login():
        """Send the user to Strava to authorize read access."""
        return redirect(authorize_url(Config.STRAVA_CLIENT_ID, Config.STRAVA_REDIRECT_URI))

    @app.route('/oauth/callback')
    def oauth_callback():
        code = request.args.get('code')
        if not code:
            return jsonify({'error': 'Missing code'}), 400
        try:
            user_id = live.login(code)
        except (TrackerError, requests.RequestException, KeyError, ValueError) as e:
            logger.error(f"Token exchange failed: {e}")
            return jsonify({'error': 'Token exchange failed'}), 500

        response = make_response(redirect(url_for('index')))
        response.set_cookie(USER_COOKIE, user_id, samesite='Lax')
        return response

    return app


def main():
    """Run the Flask application."""
    get_logger('terminus_tracker')
    app = create_app()
    app.run(host=Config.WEB_HOST, port=Config.WEB_PORT, debug=False)


if __name__ == '__main__':
    main()
