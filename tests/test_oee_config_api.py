import json


CONFIG = {
    "Plant1": {"Area1": {"Line1": {"availability": 0.92, "performance": 0.88, "quality": 0.99}}},
    "oeeAsPercent": True,
}


def test_post_then_get_round_trip(client, store_config):
    resp = client.post("/oee-config", json=CONFIG)
    assert resp.status_code == 200
    assert resp.get_json() == {"message": "oeeConfig.json saved successfully"}

    raw = store_config.oee_config_path.read_text(encoding="utf-8")
    assert raw == json.dumps(CONFIG, indent=2)

    resp = client.get("/oee-config")
    assert resp.status_code == 200
    assert json.loads(resp.get_data(as_text=True)) == CONFIG


def test_get_returns_raw_file_text(client, store_config):
    store_config.oee_config_path.parent.mkdir(parents=True)
    store_config.oee_config_path.write_text('{\n    "kept": "as is"\n}', encoding="utf-8")

    resp = client.get("/oee-config")
    assert resp.get_data(as_text=True) == '{\n    "kept": "as is"\n}'


def test_repeated_post_is_idempotent(client, store_config):
    client.post("/oee-config", json=CONFIG)
    first = store_config.oee_config_path.read_bytes()
    client.post("/oee-config", json=CONFIG)
    assert store_config.oee_config_path.read_bytes() == first


def test_post_malformed_json(client, store_config):
    resp = client.post("/oee-config", data="{bad", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Invalid JSON format", "error": "parse_error"}
    assert not store_config.oee_config_path.exists()


def test_get_missing_file_reports_error(client):
    resp = client.get("/oee-config")
    assert resp.status_code == 404
    assert resp.get_json()["error"] == "not_found"


class TestOeeConfigKeyRoutes:
    def test_get_key(self, client):
        client.post("/oee-config", json=CONFIG)
        resp = client.get("/oee-config/oeeAsPercent")
        assert resp.status_code == 200
        assert resp.get_json() == {"oeeAsPercent": True}

    def test_get_unknown_key(self, client):
        client.post("/oee-config", json=CONFIG)
        resp = client.get("/oee-config/Plant2")
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "Key Plant2 not found"

    def test_put_key(self, client):
        client.post("/oee-config", json=CONFIG)
        resp = client.put("/oee-config/oeeAsPercent", json={"value": False})
        assert resp.status_code == 200
        assert resp.get_json() == {"message": "Key oeeAsPercent updated successfully"}
        assert client.get("/oee-config/oeeAsPercent").get_json() == {"oeeAsPercent": False}

    def test_put_unknown_key(self, client):
        client.post("/oee-config", json=CONFIG)
        resp = client.put("/oee-config/Plant2", json={"value": {}})
        assert resp.status_code == 404

    def test_delete_key(self, client):
        client.post("/oee-config", json=CONFIG)
        resp = client.delete("/oee-config/oeeAsPercent")
        assert resp.status_code == 200
        assert json.loads(client.get("/oee-config").get_data(as_text=True)) == {"Plant1": CONFIG["Plant1"]}


def test_post_non_finite_numbers_rejected(client, store_config):
    for body in ('{"target": NaN}', '{"target": Infinity}', "[-Infinity]"):
        resp = client.post("/oee-config", data=body, content_type="application/json")
        assert resp.status_code == 400
        assert resp.get_json() == {"message": "Invalid JSON format", "error": "parse_error"}
    assert not store_config.oee_config_path.exists()


def test_post_non_finite_keeps_previous_document(client, store_config):
    client.post("/oee-config", json=CONFIG)
    resp = client.post("/oee-config", data='{"target": NaN}', content_type="application/json")
    assert resp.status_code == 400
    assert json.loads(store_config.oee_config_path.read_text(encoding="utf-8")) == CONFIG
