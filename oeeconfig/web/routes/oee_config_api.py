from flask import Blueprint, Response, jsonify
from ..services.request_body import json_body, json_object_body
from ..services.stores import get_stores

oee_config_bp = Blueprint("oee_config_api", __name__, url_prefix="/oee-config")

@oee_config_bp.get("")
async def api_oee_config():
    data = await get_stores().oee_config.get()
    return Response(data, mimetype="application/json")

@oee_config_bp.post("")
async def api_oee_config_update():
    store = get_stores().oee_config
    await store.set(json_body())
    return jsonify({"message": f"{store.name} saved successfully"})

@oee_config_bp.get("/<key>")
async def api_oee_config_key(key):
    value = await get_stores().oee_config.get_value(key)
    return jsonify({key: value})

@oee_config_bp.put("/<key>")
async def api_oee_config_key_update(key):
    data = json_object_body()
    await get_stores().oee_config.put_value(key, data.get("value"))
    return jsonify({"message": f"Key {key} updated successfully"})

@oee_config_bp.delete("/<key>")
async def api_oee_config_key_delete(key):
    await get_stores().oee_config.delete_value(key)
    return jsonify({"message": f"Key {key} deleted successfully"})
