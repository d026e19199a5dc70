from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .blend import blend
from .contrast import analyze_contrast
from .convert import ColorFormat, convert, describe, parse_format
from .errors import ColorError, InvalidCount
from .names import color_name
from .palette import PaletteType, generate_palette, parse_palette_type
from .parse import parse

log = logging.getLogger(__name__)

DEFAULTS: Mapping[str, Any] = {
    "ENABLED": True,  # tool guard for the whole /color category
    "PALETTE_MAX_COUNT": 64,
    "LOG_LEVEL": "INFO",
}


class RequestError(ValueError):
    """Missing or ill-typed request field; never raised by the engine."""


def _body() -> dict[str, Any]:
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise RequestError("request body must be a JSON object")
    return body


def _string(body: Mapping[str, Any], key: str, label: Optional[str] = None) -> str:
    val = body.get(key)
    if val is None or val == "":
        raise RequestError(f"{label or key} required")
    if not isinstance(val, str):
        raise RequestError(f"{key} must be a string")
    return val


def _number(body: Mapping[str, Any], key: str, default: Any) -> Any:
    val = body.get(key, default)
    if val is None:
        return default
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise RequestError(f"{key} must be a number")
    return val


# ----------------------------- Flask app ----------------------------------


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULTS)
    app.config.from_prefixed_env("COLOR_TOOLS")
    if test_config is not None:
        app.config.from_mapping(test_config)
    logging.basicConfig(
        level=app.config["LOG_LEVEL"], format="%(levelname)s: %(message)s"
    )

    @app.before_request
    def guard():
        if not request.path.startswith("/color/") or request.endpoint == "health":
            return None
        if not app.config["ENABLED"]:
            return (
                jsonify(
                    {
                        "error": 'The "color" tool category is currently disabled. '
                        "Enable it in Settings."
                    }
                ),
                404,
            )
        return None

    @app.errorhandler(ColorError)
    def color_error(exc: ColorError):
        log.info("rejected %s: %s", request.path, exc)
        return jsonify(exc.to_dict()), 400

    @app.errorhandler(RequestError)
    def request_error(exc: RequestError):
        log.info("bad request %s: %s", request.path, exc)
        return jsonify({"error": str(exc)}), 400

    @app.errorhandler(Exception)
    def unexpected(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Color operation failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/color/health")
    def health():
        return jsonify(
            {
                "enabled": bool(app.config["ENABLED"]),
                "formats": [f.value for f in ColorFormat],
                "palette_types": [t.value for t in PaletteType],
            }
        )

    @app.route("/color/parse", methods=["POST"])
    def parse_color():
        body = _body()
        return jsonify(describe(parse(_string(body, "input", "Color input"))))

    @app.route("/color/convert", methods=["POST"])
    def convert_color():
        body = _body()
        c = parse(_string(body, "input", "Color input"))
        to = parse_format(_string(body, "to", "Target format"))
        return jsonify({"result": convert(c, to), "to": to.value})

    @app.route("/color/contrast", methods=["POST"])
    def contrast():
        body = _body()
        c1 = parse(_string(body, "color1"))
        c2 = parse(_string(body, "color2"))
        return jsonify(analyze_contrast(c1, c2).to_dict())

    @app.route("/color/blend", methods=["POST"])
    def blend_colors():
        body = _body()
        c1 = parse(_string(body, "color1"))
        c2 = parse(_string(body, "color2"))
        ratio = _number(body, "ratio", 0.5)
        return jsonify({"color": describe(blend(c1, c2, ratio)), "ratio": ratio})

    @app.route("/color/palette", methods=["POST"])
    def palette():
        body = _body()
        base = parse(_string(body, "base", "Base color"))
        kind = parse_palette_type(_string(body, "type", "Palette type"))
        count = body.get("count")
        limit = int(app.config["PALETTE_MAX_COUNT"])
        if isinstance(count, int) and not isinstance(count, bool) and count > limit:
            raise InvalidCount(f"count must be at most {limit}, got {count}")
        colors = generate_palette(base, kind, count)
        return jsonify({"type": kind.value, "colors": [describe(c) for c in colors]})

    @app.route("/color/name", methods=["POST"])
    def name():
        body = _body()
        return jsonify(color_name(parse(_string(body, "input", "Color input")))._asdict())

    return app


if __name__ == "__main__":
    # Production: debug=False; threaded=True is fine, the engine holds no state.
    create_app().run(debug=False, threaded=True)
