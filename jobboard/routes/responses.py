from flask import jsonify, request

from jobboard.errors import ValidationError


def ok(data=None, message=None, status=200):
    """Success envelope: ``{success: true, data?, message?}``."""
    body = {"success": True}
    if data is not None:
        body["data"] = data
    if message:
        body["message"] = message
    return jsonify(body), status


def json_body():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("No JSON data provided")
    return data
