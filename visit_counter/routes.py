"""Root endpoint: stored message plus visit counter."""

import logging

from flask import Blueprint, current_app, jsonify, request

from visit_counter.database import VisitCounterError, connection
from visit_counter.repositories import VisitRepository
from visit_counter.schemas import VisitResponse, visit_response_schema
from visit_counter.security import log_api_request

bp = Blueprint("visits", __name__)
logger = logging.getLogger(__name__)

# Any method a browser may send after the permissive preflight
METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@bp.route("/", methods=METHODS)
@log_api_request()
def index():
    """Read the message, bump the counter and return both.

    A fresh connection is opened for every request and released before the
    response is built. Any connection or query failure ends the request with
    a 500 and an `error` body.
    """
    # Preflight
    if request.method == "OPTIONS":
        return "", 200

    db_settings = current_app.extensions["db_settings"]
    try:
        with connection(db_settings) as conn:
            repo = VisitRepository(conn)
            message = repo.get_message()
            repo.increment_visits()
            visits = repo.get_visits()
    except VisitCounterError as e:
        logger.error(f"Visit request failed: {e}")
        return jsonify(visit_response_schema.dump(VisitResponse.failure(e))), 500

    return jsonify(visit_response_schema.dump(VisitResponse(message=message, visits=visits)))
