from flask import Blueprint

from jobboard.routes.responses import json_body, ok
from jobboard.services.access import current_user, session_required
from jobboard.services.auth import AuthService

auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
def register():
    data = json_body()
    user, token = AuthService.register(
        name=data.get("name"),
        email=data.get("email"),
        password=data.get("password"),
        role=data.get("role"),
        company=data.get("company"),
    )
    return ok({"user": user.to_public_dict(), "token": token}, status=201)


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    user, token = AuthService.login(data.get("email"), data.get("password"))
    return ok({"user": user.to_public_dict(), "token": token})


@auth_bp.route("/me", methods=["GET"])
@session_required()
def me():
    return ok(current_user().to_public_dict())
