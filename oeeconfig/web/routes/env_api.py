from flask import Blueprint, Response, jsonify, request
from ..services.stores import get_stores

env_bp = Blueprint("env_api", __name__, url_prefix="/env")

@env_bp.get("")
def api_env():
    return Response(get_stores().env.get_bytes(), mimetype="text/plain")

@env_bp.post("")
def api_env_update():
    store = get_stores().env
    store.set(request.get_data())
    return jsonify({"message": f"{store.name} saved successfully."})
