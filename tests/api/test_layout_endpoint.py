from httpx import AsyncClient


async def test_analyze_layout(client: AsyncClient):
    res = await client.post("/api/v1/layout/analyze", json={
        "grid": [
            [{"name": "Tomato"}, {"name": "Cabbage"}, {"name": "Squash"}],
            [None, {"name": "Sweet Basil", "catalog_key": "Basil"}, None],
        ],
    })
    assert res.status_code == 200
    data = res.json()
    assert data["rows"] == 2
    assert data["cols"] == 3
    assert data["occupied"] == 4
    assert [(a["kind"], a["cells"]) for a in data["alerts"]] == [
        ("companion-conflict", [[0, 0], [0, 1]]),
        ("companion-synergy", [[0, 0], [1, 1]]),
        ("water-mismatch", [[1, 1]]),
    ]
    assert data["alerts"][0]["severity"] == "error"
    assert data["alerts"][1]["message"] == "Tomato and Sweet Basil are excellent companions!"


async def test_analyze_empty_layout(client: AsyncClient):
    res = await client.post("/api/v1/layout/analyze", json={"grid": [[None, None], [None, None]]})
    assert res.status_code == 200
    assert res.json()["alerts"] == []


async def test_analyze_layout_rejects_bad_cells(client: AsyncClient):
    res = await client.post("/api/v1/layout/analyze", json={"grid": [[{"label": "Tomato"}]]})
    assert res.status_code == 422
