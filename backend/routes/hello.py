import logging

from flask import Blueprint

bp = Blueprint("hello", __name__)
logger = logging.getLogger(__name__)

GREETING = "Hello, World"


@bp.route("/hello", methods=["GET"])
def hello():
    """Return the fixed greeting.

    ---
    tags:
      - Hello
    produces:
      - text/html
    responses:
      200:
        description: The greeting text
    """
    logger.debug("Serving greeting")
    return GREETING
