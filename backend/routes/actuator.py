"""Operational endpoints: health status and a discovery index."""

from flask import Blueprint, abort, jsonify, request

bp = Blueprint("actuator", __name__, url_prefix="/actuator")

# Health contributors reported by /actuator/health/<component>.
HEALTH_COMPONENTS = {"ping": lambda: "UP"}


def _link(path: str, templated: bool = False) -> dict:
    return {"href": request.host_url.rstrip("/") + path, "templated": templated}


@bp.route("", methods=["GET"])
def index():
    """List the exposed operational endpoints.

    ---
    tags:
      - Actuator
    responses:
      200:
        description: Links to each operational endpoint
    """
    return jsonify({
        "_links": {
            "self": _link("/actuator"),
            "health": _link("/actuator/health"),
            "health-path": _link("/actuator/health/{*path}", templated=True),
        }
    })


@bp.route("/health", methods=["GET"])
def health():
    """Report that the service is up.

    ---
    tags:
      - Actuator
    responses:
      200:
        description: Service is reachable
    """
    return jsonify({"status": "UP"})


@bp.route("/health/<path:component>", methods=["GET"])
def component_health(component):
    """Report the status of a single health component.

    ---
    tags:
      - Actuator
    parameters:
      - name: component
        in: path
        type: string
        required: true
    responses:
      200:
        description: Component status
      404:
        description: Unknown component
    """
    check = HEALTH_COMPONENTS.get(component)
    if check is None:
        abort(404, description=f"No health component named '{component}'")
    return jsonify({"status": check()})
