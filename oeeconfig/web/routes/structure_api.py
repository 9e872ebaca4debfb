from flask import Blueprint, jsonify
from ..services.request_body import json_body
from ..services.stores import get_stores

structure_bp = Blueprint("structure_api", __name__, url_prefix="/structure")

@structure_bp.get("")
def api_structure():
    return jsonify(get_stores().structure.read())

@structure_bp.post("")
def api_structure_update():
    store = get_stores().structure
    store.write(json_body())
    return jsonify({"message": f"{store.name} saved successfully."})
