import json

from troubleshooting_guide.domain.models import DecisionOption

HAIR_DRYER = "hair-dryer-pro-2024"


def _start(client, device_id=HAIR_DRYER):
    response = client.post("/sessions", json={"device_id": device_id})
    assert response.status_code == 201
    return response.json()


def test_power_scenario_over_http(client):
    view = _start(client)
    sid = view["session_id"]
    assert view["node"]["id"] == "initial-problem"
    assert view["can_go_back"] is False

    view = client.post(f"/sessions/{sid}/select", json={"option_id": "power-issue"}).json()
    assert view["node"]["id"] == "power-troubleshoot"
    assert view["history"] == [
        {"node_id": "initial-problem", "selected_option": "power-issue"}
    ]

    view = client.post(f"/sessions/{sid}/select", json={"option_id": "outlet-not-working"}).json()
    assert view["node"]["id"] == "test-outlet"
    assert view["progress"] == 3

    view = client.post(
        f"/sessions/{sid}/select", json={"option_id": "outlet-not-working-confirmed"}
    ).json()
    assert view["node"]["id"] == "test-outlet"
    assert len(view["history"]) == 2
    assert view["inline_solution"].startswith("The issue is with the electrical outlet")

    client.post(f"/sessions/{sid}/back")
    view = client.post(f"/sessions/{sid}/back").json()
    assert view["node"]["id"] == "initial-problem"
    assert view["history"] == []

    # back on empty history stays put
    response = client.post(f"/sessions/{sid}/back")
    assert response.status_code == 200
    assert response.json()["node"]["id"] == "initial-problem"


def test_restart_and_get(client):
    sid = _start(client)["session_id"]
    client.post(f"/sessions/{sid}/select", json={"option_id": "noise-issue"})

    view = client.get(f"/sessions/{sid}").json()
    assert view["node"]["id"] == "noise-troubleshoot"
    assert view["is_terminal"] is True

    view = client.post(f"/sessions/{sid}/restart").json()
    assert view["node"]["id"] == "initial-problem"
    assert view["progress"] == 1


def test_unknown_option_is_a_bad_request(client):
    sid = _start(client)["session_id"]

    response = client.post(f"/sessions/{sid}/select", json={"option_id": "light-on"})

    assert response.status_code == 400
    assert "light-on" in response.json()["detail"]


def test_dangling_reference_is_a_conflict(client, tree_repo):
    tree = tree_repo.get_tree("straightener-elite-x1")
    tree.nodes["straightener-initial"].options.append(
        DecisionOption(id="broken", text="Broken", next_node_id="nowhere")
    )
    sid = _start(client, "straightener-elite-x1")["session_id"]

    response = client.post(f"/sessions/{sid}/select", json={"option_id": "broken"})

    assert response.status_code == 409
    assert "nowhere" in response.json()["detail"]
    # the hair dryer is unaffected
    assert _start(client)["node"]["id"] == "initial-problem"


def test_session_not_found(client):
    assert client.get("/sessions/nope").status_code == 404
    assert client.post("/sessions", json={"device_id": "curling-iron-deluxe"}).status_code == 404


def test_delete_session(client):
    sid = _start(client)["session_id"]

    assert client.delete(f"/sessions/{sid}").status_code == 204
    assert client.delete(f"/sessions/{sid}").status_code == 404
    assert client.get(f"/sessions/{sid}").status_code == 404


def test_device_search_and_facets(client):
    devices = client.get("/devices", params={"search": "armani"}).json()
    assert {d["id"] for d in devices} == {"kscan-armani", "hair-dryer-armani"}
    assert "coreDevice" in devices[0]

    facets = client.get("/devices/facets").json()
    assert facets["brand_names"] == ["Armani", "L'Oréal"]


def test_save_and_delete_device(client):
    response = client.post(
        "/devices",
        json={
            "id": "travel-dryer",
            "name": "Travel Dryer",
            "model": "TD-1",
            "coreDevice": "Hair Dryer",
            "brandName": "Acme",
        },
    )
    assert response.status_code == 200
    assert "travel-dryer" in {d["id"] for d in response.json()}

    response = client.delete(f"/devices/{HAIR_DRYER}")
    assert HAIR_DRYER not in {d["id"] for d in response.json()}
    assert HAIR_DRYER not in client.get("/decision-trees").json()


def test_save_device_missing_fields(client):
    response = client.post("/devices", json={"name": "Incomplete"})

    assert response.status_code == 422
    assert response.json()["detail"].startswith("Please fill in all required fields")


def test_import_tree_then_navigate(client, tree_document):
    response = client.post(
        "/decision-trees/curling-iron-deluxe/import",
        content=json.dumps(tree_document),
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json()["deviceId"] == "curling-iron-deluxe"

    sid = _start(client, "curling-iron-deluxe")["session_id"]
    view = client.post(f"/sessions/{sid}/select", json={"option_id": "no-heat"}).json()
    assert view["node"]["id"] == "check-fuse"
    assert view["is_terminal"] is True
    assert view["node"]["solution"] == "Replace the 3A fuse in the plug."
    assert view["node"]["additional_info"] == "Use a fuse of the same rating."


def test_invalid_import_is_rejected(client, tree_document):
    tree_document["rootNodeId"] = "missing"

    response = client.post(
        "/decision-trees/curling-iron-deluxe/import", content=json.dumps(tree_document)
    )

    assert response.status_code == 422
    assert response.json()["detail"] == 'Root node "missing" not found in nodes.'
    assert client.get("/decision-trees/curling-iron-deluxe").status_code == 404


def test_save_and_delete_tree(client, tree_document):
    tree_document["deviceId"] = "facial-steamer-spa"

    trees = client.post("/decision-trees", json=tree_document).json()
    assert trees["facial-steamer-spa"]["rootNodeId"] == "start"

    trees = client.delete("/decision-trees/facial-steamer-spa").json()
    assert "facial-steamer-spa" not in trees
    assert HAIR_DRYER in trees


def test_undecodable_import_is_rejected(client):
    response = client.post(
        "/decision-trees/curling-iron-deluxe/import", content=b"\xff\xfe\xfd"
    )

    assert response.status_code == 422
    assert response.json()["detail"].startswith("Invalid JSON file")
