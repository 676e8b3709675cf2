import pytest

from main import create_app


@pytest.fixture
def app(clock):
    return create_app({"TESTING": True, "SECRET_KEY": "test", "CLOCK": clock})


@pytest.fixture
def client(app):
    return app.test_client()


def test_index_renders(client):
    res = client.get("/")
    assert res.status_code == 200
    assert b"Kruskal" in res.data
    assert b"<svg" in res.data


def test_new_session_holds_sample_graph(client):
    data = client.get("/api/graph").get_json()
    assert [n["id"] for n in data["nodes"]] == list("ABCDEFG")
    assert len(data["edges"]) == 8


def test_run_then_step(client):
    data = client.post("/api/run").get_json()
    assert data["has_run"]
    assert data["cursor"] == 0
    assert data["total_steps"] == 8
    assert data["message"] == "Ready to visualize Kruskal's steps."

    data = client.post("/api/step/next").get_json()
    assert data["cursor"] == 1
    assert data["current_edge_id"] == 6
    assert data["visible_cost"] == 1

    data = client.post("/api/step/end").get_json()
    assert data["is_complete"]
    assert data["visible_cost"] == 21
    assert data["skipped_ids"] == [4, 8]

    data = client.post("/api/step/reset").get_json()
    assert data["cursor"] == 0
    assert data["message"] == "Ready to start algorithm"


def test_step_without_run_is_conflict(client):
    res = client.post("/api/step/next")
    assert res.status_code == 409


def test_unknown_step_action(client):
    client.post("/api/run")
    assert client.post("/api/step/sideways").status_code == 404


def test_run_on_empty_graph_is_bad_request(client):
    client.post("/api/graph/clear")
    res = client.post("/api/run")
    assert res.status_code == 400
    body = res.get_json()
    assert body["error"] == "Please add nodes first"
    assert body["type"] == "InvalidGraph"


def test_editing_graph_discards_run(client):
    client.post("/api/run")
    data = client.post("/api/graph/sample").get_json()
    assert not data["has_run"]
    assert client.get("/api/export/mst.csv").status_code == 409


def test_replace_graph(client):
    payload = {
        "nodes": [{"id": "X"}, {"id": "Y"}],
        "edges": [{"id": 1, "from": "X", "to": "Y", "weight": 4}],
    }
    client.post("/api/graph", json=payload)
    data = client.post("/api/run").get_json()
    assert data["total_steps"] == 1


def test_replace_graph_rejects_bad_weight(client):
    payload = {
        "nodes": [{"id": "X"}, {"id": "Y"}],
        "edges": [{"id": 1, "from": "X", "to": "Y", "weight": -4}],
    }
    res = client.post("/api/graph", json=payload)
    assert res.status_code == 400
    assert res.get_json()["type"] == "InvalidEdge"


def test_import_adjacency_list(client):
    data = client.post("/api/graph/import", json={"text": "A: B(1) C(2)\nB: C(3)"}).get_json()
    assert len(data["graph"]["edges"]) == 3
    data = client.post("/api/run").get_json()
    assert data["total_steps"] == 3


def test_autoplay_advances_on_poll(client, clock):
    client.post("/api/run")
    data = client.post("/api/step/play").get_json()
    assert data["playing"]

    clock.advance(1.0)
    assert client.get("/api/state").get_json()["cursor"] == 0
    clock.advance(1.0)
    assert client.get("/api/state").get_json()["cursor"] == 1

    client.post("/api/step/pause")
    clock.advance(10.0)
    data = client.get("/api/state").get_json()
    assert data["cursor"] == 1
    assert not data["playing"]


def test_speed_is_clamped(client):
    data = client.post("/api/config/speed", json={"speed": 10}).get_json()
    assert data["speed"] == 2.0
    assert data["interval"] == pytest.approx(1.0)
    data = client.post("/api/config/speed", json={"preset": "slow"}).get_json()
    assert data["speed"] == 0.5
    assert data["interval"] == pytest.approx(4.0)


def test_bad_speed_is_bad_request(client):
    assert client.post("/api/config/speed", json={"speed": "fast"}).status_code == 400
    assert client.post("/api/config/speed", json={"preset": "warp"}).status_code == 400


def test_exports_require_run(client):
    res = client.get("/api/export/steps.csv")
    assert res.status_code == 409
    assert "Run Kruskal first" in res.get_json()["error"]


def test_exports(client):
    client.post("/api/run")

    res = client.get("/api/export/mst.csv")
    assert res.mimetype == "text/csv"
    assert "mst_results.csv" in res.headers["Content-Disposition"]
    assert res.get_data(as_text=True).startswith("Edge,Source,Destination,Weight\n")

    res = client.get("/api/export/mst.txt")
    assert "Total MST Cost: 21" in res.get_data(as_text=True)

    res = client.get("/api/export/steps.csv")
    assert "kruskal_steps.csv" in res.headers["Content-Disposition"]
    assert len(res.get_data(as_text=True).splitlines()) == 9

    res = client.get("/api/export/steps.html")
    assert b"steps-table" in res.data

    data = client.get("/api/export/run.json").get_json()
    assert data["total_cost"] == 21
    assert data["metrics"]["added"] == 6

    assert client.get("/api/export/nope").status_code == 404


def test_sessions_are_isolated(app):
    a, b = app.test_client(), app.test_client()
    a.post("/api/run")
    a.post("/api/step/next")
    assert b.post("/api/step/next").status_code == 409


def test_string_weights_run_end_to_end(client):
    payload = {
        "nodes": [{"id": "A"}, {"id": "B"}, {"id": "C"}],
        "edges": [
            {"id": 1, "from": "A", "to": "B", "weight": "10"},
            {"id": 2, "from": "B", "to": "C", "weight": "9"},
        ],
    }
    assert client.post("/api/graph", json=payload).status_code == 200
    assert client.get("/api/graph").get_json()["edges"][0]["weight"] == 10.0

    res = client.post("/api/run")
    assert res.status_code == 200
    assert res.get_json()["total_steps"] == 2

    assert client.post("/api/step/next").get_json()["current_edge_id"] == 2
    assert client.post("/api/step/end").get_json()["visible_cost"] == 19


def _sid(client):
    with client.session_transaction() as sess:
        return sess["sid"]


def test_session_store_is_bounded(clock):
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "CLOCK": clock, "MAX_SESSIONS": 3})
    for _ in range(10):
        assert app.test_client().get("/api/state").status_code == 200
    assert len(app.extensions["kruskal_sessions"]) == 3


def test_session_store_evicts_least_recently_used(clock):
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "CLOCK": clock, "MAX_SESSIONS": 2})
    store = app.extensions["kruskal_sessions"]
    a, b, c = app.test_client(), app.test_client(), app.test_client()
    a.get("/api/state")
    b.get("/api/state")
    a.get("/api/state")
    c.get("/api/state")

    assert _sid(a) in store
    assert _sid(b) not in store
    assert _sid(c) in store


def test_evicted_session_starts_over(clock):
    app = create_app({"TESTING": True, "SECRET_KEY": "test", "CLOCK": clock, "MAX_SESSIONS": 1})
    a, b = app.test_client(), app.test_client()
    a.post("/api/run")
    b.get("/api/state")
    data = a.get("/api/state").get_json()
    assert not data["has_run"]
    assert len(data["graph"]["nodes"]) == 7


def test_add_and_delete_node(client):
    data = client.post("/api/graph/node", json={"name": "H", "x": 120, "y": 80}).get_json()
    node = data["graph"]["nodes"][-1]
    assert (node["id"], node["x"], node["y"]) == ("H", 120.0, 80.0)

    data = client.delete("/api/graph/node/A").get_json()
    assert "A" not in [n["id"] for n in data["graph"]["nodes"]]
    assert all("A" not in (e["from"], e["to"]) for e in data["graph"]["edges"])

    assert client.delete("/api/graph/node/A").status_code == 404


def test_add_node_rejects_duplicates_and_blanks(client):
    res = client.post("/api/graph/node", json={"name": "A"})
    assert res.status_code == 400
    assert res.get_json()["type"] == "InvalidEdge"
    assert client.post("/api/graph/node", json={"name": "  "}).status_code == 400
    assert client.post("/api/graph/node", json={"name": "Q", "x": "left"}).status_code == 400


def test_add_and_delete_edge(client):
    data = client.post("/api/graph/edge", json={"from": "A", "to": "G", "weight": "3"}).get_json()
    edge = data["graph"]["edges"][-1]
    assert (edge["id"], edge["from"], edge["to"], edge["weight"]) == (9, "A", "G", 3.0)

    data = client.delete("/api/graph/edge/9").get_json()
    assert len(data["graph"]["edges"]) == 8
    assert client.delete("/api/graph/edge/9").status_code == 404


@pytest.mark.parametrize("edge", [
    {"from": "A", "to": "B", "weight": "heavy"},
    {"from": "A", "to": "B", "weight": 0},
    {"from": "A", "to": "Z", "weight": 1},
    {"from": "A", "to": "A", "weight": 1},
])
def test_add_edge_validation(client, edge):
    res = client.post("/api/graph/edge", json=edge)
    assert res.status_code == 400
    assert res.get_json()["type"] == "InvalidEdge"
    assert len(client.get("/api/graph").get_json()["edges"]) == 8


def test_structural_edits_discard_run(client):
    for edit in (
        lambda: client.post("/api/graph/node", json={"name": "H"}),
        lambda: client.post("/api/graph/edge", json={"from": "A", "to": "H", "weight": 2}),
        lambda: client.delete("/api/graph/edge/1"),
        lambda: client.delete("/api/graph/node/H"),
    ):
        client.post("/api/run")
        client.post("/api/step/next")
        assert not edit().get_json()["has_run"]
        assert client.post("/api/step/next").status_code == 409


def test_moving_a_node_keeps_run(client):
    client.post("/api/run")
    client.post("/api/step/next")
    data = client.post("/api/graph/node/A/move", json={"x": 50, "y": 60}).get_json()
    assert data["has_run"]
    assert data["cursor"] == 1
    assert client.post("/api/graph/node/Z/move", json={"x": 1, "y": 1}).status_code == 400


@pytest.mark.parametrize("speed", ["nan", "inf", "-inf"])
def test_non_finite_speed_is_bad_request(client, speed):
    res = client.post("/api/config/speed", json={"speed": speed})
    assert res.status_code == 400
    assert res.get_json()["type"] == "ValueError"


def test_svg_export_before_and_after_run(client):
    res = client.get("/api/export/graph.svg")
    assert res.status_code == 200
    assert res.mimetype == "image/svg+xml"
    assert "graph_mst.svg" in res.headers["Content-Disposition"]
    body = res.get_data(as_text=True)
    assert "<svg" in body
    assert "edge-mst" not in body

    client.post("/api/run")
    body = client.get("/api/export/graph.svg").get_data(as_text=True)
    assert body.count("edge edge-mst") == 6
    assert "dsu-panel" not in body


def test_png_export(client):
    res = client.get("/api/export/graph.png")
    assert res.mimetype == "image/png"
    assert res.data.startswith(b"\x89PNG")


def test_pdf_report(client):
    assert client.get("/api/export/report.pdf").status_code == 409
    client.post("/api/run")
    res = client.get("/api/export/report.pdf")
    assert res.status_code == 200
    assert res.mimetype == "application/pdf"
    assert "kruskal_report.pdf" in res.headers["Content-Disposition"]
    assert res.data.startswith(b"%PDF")
