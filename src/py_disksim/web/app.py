"""Flask application factory for the py-disksim JSON API.

The ``create_app`` function returns a Flask app with two endpoints:

- ``GET /api/policies`` — the available policies and what they need.
- ``POST /api/simulate`` — run one policy and return the result as JSON.
"""

from __future__ import annotations

from typing import Any

from flask import Flask, Response, jsonify, request

from py_disksim.config import Policy, SimulationConfig
from py_disksim.engine import simulate
from py_disksim.geometry import DiskGeometry
from py_disksim.requests import (
    Direction,
    DiskRequest,
    InvalidRequestError,
    SimulationError,
    parse_requests,
)
from py_disksim.trace import SimulationResult, Step

_HTTP_BAD_REQUEST = 400


def _parse_request_list(items: list[Any]) -> list[DiskRequest]:
    """Accept ``120``, ``"120:3.5"`` or ``{"position": 120, "arrival_time": 3.5}``."""
    requests: list[DiskRequest] = []
    for order, item in enumerate(items, start=1):
        match item:
            case bool():
                msg = f"Invalid request {item!r}"
                raise InvalidRequestError(msg)
            case int():
                requests.append(DiskRequest(position=item, order=order))
            case str():
                parsed = parse_requests(item)
                if len(parsed) != 1:
                    msg = f"Invalid request {item!r}"
                    raise InvalidRequestError(msg)
                requests.append(
                    DiskRequest(
                        position=parsed[0].position,
                        order=order,
                        arrival_time=parsed[0].arrival_time,
                    )
                )
            case {"position": int() as position, **rest}:
                arrival = rest.get("arrival_time", 0.0)
                if isinstance(arrival, bool) or not isinstance(arrival, int | float):
                    msg = f"Invalid arrival time {arrival!r}"
                    raise InvalidRequestError(msg)
                requests.append(
                    DiskRequest(position=position, order=order, arrival_time=float(arrival))
                )
            case _:
                msg = f"Invalid request {item!r}"
                raise InvalidRequestError(msg)
    return requests


def _int_field(data: dict[str, Any], name: str, default: int | None = None) -> int | None:
    """Return an integer field, rejecting floats, booleans and strings."""
    value = data.get(name, default)
    if value is None or (isinstance(value, int) and not isinstance(value, bool)):
        return value
    msg = f"'{name}' must be an integer (got {value!r})"
    raise InvalidRequestError(msg)


def _number_field(data: dict[str, Any], name: str, default: float) -> float:
    """Return a numeric field as a float, rejecting booleans and strings."""
    value = data.get(name, default)
    if isinstance(value, bool) or not isinstance(value, int | float):
        msg = f"'{name}' must be a number (got {value!r})"
        raise InvalidRequestError(msg)
    return float(value)


def _config_from_json(data: dict[str, Any]) -> SimulationConfig:
    """Build a configuration from a JSON body (raises on bad values)."""
    initial_position = _int_field(data, "initial_position")
    min_cylinder = _int_field(data, "min_cylinder", 0)
    max_cylinder = _int_field(data, "max_cylinder", 199)
    if initial_position is None or min_cylinder is None or max_cylinder is None:
        msg = "'initial_position', 'min_cylinder' and 'max_cylinder' must not be null"
        raise InvalidRequestError(msg)
    try:
        direction = Direction(data.get("direction", "up"))
    except ValueError:
        msg = f"Invalid direction {data.get('direction')!r}"
        raise InvalidRequestError(msg) from None
    return SimulationConfig(
        policy=Policy.parse(str(data["policy"])),
        initial_position=initial_position,
        min_cylinder=min_cylinder,
        max_cylinder=max_cylinder,
        direction=direction,
        time_per_cylinder=_number_field(data, "time_per_cylinder", 1.0),
        time_per_request=_number_field(data, "time_per_request", 0.0),
        batch_size=_int_field(data, "batch_size"),
    )


_GEOMETRY_FIELDS = ("sectors_per_track", "cylinders", "faces", "sector_size", "block_size")


def _geometry_from_json(data: dict[str, Any]) -> DiskGeometry:
    """Build the disk layout from the optional ``geometry`` object."""
    spec = data.get("geometry", {})
    if not isinstance(spec, dict):
        msg = "'geometry' must be an object"
        raise InvalidRequestError(msg)
    fields: dict[str, int] = {}
    for name in _GEOMETRY_FIELDS:
        value = _int_field(spec, name)
        if value is not None:
            fields[name] = value
    return DiskGeometry(**fields)


def _step_to_json(step: Step) -> dict[str, Any]:
    return {
        "from": step.start,
        "to": step.end,
        "distance": step.distance,
        "departure": step.departure,
        "arrival": step.arrival,
        "kind": step.kind.value,
        "servicing": step.servicing,
        "intercepted": step.intercepted,
        "order": step.request.order if step.request is not None else None,
    }


def result_to_json(result: SimulationResult) -> dict[str, Any]:
    """Serialize a simulation result into JSON-compatible types."""
    return {
        "policy": result.policy.value,
        "initial_position": result.initial_position,
        "direction": result.direction.value,
        "final_direction": result.final_direction.value,
        "processing_order": list(result.processing_order),
        "total_movement": result.total_movement,
        "elapsed_time": result.elapsed_time,
        "average_seek": result.average_seek,
        "trace": [_step_to_json(step) for step in result.trace],
        "log": [str(entry) for entry in result.log],
    }


def create_app() -> Flask:
    """Create and configure the Flask application.

    Returns:
        A configured Flask application ready to serve.

    """
    app = Flask(__name__)

    @app.route("/api/policies")
    def policies() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return every policy with its description and requirements."""
        return jsonify(
            [
                {
                    "name": p.value,
                    "description": p.description,
                    "direction_aware": p.direction_aware,
                    "batched": p.batched,
                }
                for p in Policy
            ]
        )

    @app.route("/api/simulate", methods=["POST"])
    def run_simulation() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Run one simulation.

        Expects a JSON body with ``policy``, ``requests`` and
        ``initial_position``; the other parameters are optional.  With
        ``"blocks": true`` the requests are block numbers, mapped to
        cylinders through the optional ``geometry`` object.

        Returns:
            The serialized result, or ``{"error": ...}`` with status 400.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "Expected a JSON object"}), _HTTP_BAD_REQUEST
        missing = [f for f in ("policy", "requests", "initial_position") if f not in data]
        if missing:
            fields = ", ".join(missing)
            return jsonify({"error": f"Missing field(s): {fields}"}), _HTTP_BAD_REQUEST

        try:
            config = _config_from_json(data)
            raw = data["requests"]
            if isinstance(raw, str):
                requests = parse_requests(raw)
            elif isinstance(raw, list):
                requests = _parse_request_list(raw)
            else:
                msg = "'requests' must be a list or a string"
                raise InvalidRequestError(msg)
            blocks = data.get("blocks", False)
            if not isinstance(blocks, bool):
                msg = "'blocks' must be true or false"
                raise InvalidRequestError(msg)
            if blocks:
                requests = _geometry_from_json(data).blocks_to_cylinders(requests)
            result = simulate(config, requests)
        except SimulationError as e:
            return jsonify({"error": str(e)}), _HTTP_BAD_REQUEST

        return jsonify(result_to_json(result))

    return app


def main() -> None:
    """Run the web API development server.

    This is the ``py-disksim-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)
