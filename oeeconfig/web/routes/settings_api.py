from flask import Blueprint, jsonify
from ..services.request_body import json_object_body
from ..services.stores import get_stores

settings_bp = Blueprint("settings_api", __name__, url_prefix="/settings")

@settings_bp.get("/env")
def api_settings_env():
    return jsonify(get_stores().env.values())

@settings_bp.put("/env")
def api_settings_env_replace():
    get_stores().env.replace(json_object_body())
    return jsonify({"message": "Environment configuration updated successfully"})

@settings_bp.post("/env")
def api_settings_env_add():
    get_stores().env.update(json_object_body())
    return jsonify({"message": "New configuration added successfully"}), 201

@settings_bp.get("/env/<key>")
def api_settings_env_key(key):
    return jsonify({key: get_stores().env.get_value(key)})

@settings_bp.put("/env/<key>")
def api_settings_env_key_update(key):
    data = json_object_body()
    get_stores().env.set_value(key, data.get("value"))
    return jsonify({"message": f"Key {key} updated successfully"})

@settings_bp.delete("/env/<key>")
def api_settings_env_key_delete(key):
    get_stores().env.unset_value(key)
    return jsonify({"message": f"Key {key} deleted successfully"})
