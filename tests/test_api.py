def create(client, path, payload):
    response = client.post(path, json=payload)
    assert response.status_code == 200, response.text
    return response.json()


def build_zone(client):
    league = create(client, "/leagues/", {"league_name": "Liga Regional"})
    category = create(client, "/categories/", {"category_name": "Sub-15", "league_id": league["league_id"]})
    zone = create(
        client,
        "/zones/",
        {"zone_name": "Zona A", "league_id": league["league_id"], "category_id": category["category_id"]},
    )
    return league, category, zone


def create_team(client, zone, name):
    return create(
        client,
        "/teams/",
        {
            "team_name": name,
            "league_id": zone["league_id"],
            "category_id": zone["category_id"],
            "zone_id": zone["zone_id"],
        },
    )


def test_full_round_over_http(client):
    league, category, zone = build_zone(client)
    home = create_team(client, zone, "A")
    away = create_team(client, zone, "B")
    fixture = create(
        client,
        "/fixtures/",
        {
            "date": "2024-03-02",
            "match_date": "2024-03-02",
            "league_id": league["league_id"],
            "category_id": category["category_id"],
            "zone_id": zone["zone_id"],
            "matches": [{"home_team_id": home["team_id"], "away_team_id": away["team_id"]}],
        },
    )
    match_id = fixture["matches"][0]["match_id"]

    response = client.post(f"/matches/{match_id}/result", json={"home_score": 1, "away_score": 3})
    assert response.status_code == 200
    assert response.json()["played"] is True

    ranked = client.get(f"/standings/by-zone/{zone['zone_id']}/ranked").json()
    assert [s["team_id"] for s in ranked] == [away["team_id"], home["team_id"]]
    assert ranked[0]["points"] == 3

    export = client.get(f"/standings/by-zone/{zone['zone_id']}/export-csv")
    assert export.status_code == 200
    assert "posiciones_" in export.headers["content-disposition"]
    assert export.text.splitlines()[1].startswith("1,B,")


def test_zone_delete_over_http(client):
    _, category, zone = build_zone(client)
    create_team(client, zone, "A")

    response = client.delete(f"/zones/{zone['zone_id']}")
    assert response.status_code == 200

    assert client.get(f"/zones/by-category/{category['category_id']}").json() == []
    assert client.get(f"/teams/by-zone/{zone['zone_id']}").json() == []
    assert client.get(f"/standings/by-zone/{zone['zone_id']}").json() == []


def test_missing_entities_answer_404(client):
    assert client.get("/leagues/L404").status_code == 404
    assert client.patch("/teams/T404", json={"team_name": "X"}).status_code == 404
    assert client.post("/matches/M404/result", json={"home_score": 0, "away_score": 0}).status_code == 404


def test_invalid_payloads_are_rejected(client):
    _, _, zone = build_zone(client)
    team = create_team(client, zone, "A")

    same_team = client.post(
        "/fixtures/",
        json={
            "date": "2024-03-02",
            "match_date": "2024-03-02",
            "league_id": zone["league_id"],
            "category_id": zone["category_id"],
            "zone_id": zone["zone_id"],
            "matches": [{"home_team_id": team["team_id"], "away_team_id": team["team_id"]}],
        },
    )
    assert same_team.status_code == 422

    negative = client.post("/matches/M1/result", json={"home_score": -1, "away_score": 0})
    assert negative.status_code == 422


def test_league_patch_over_http(client):
    league, _, _ = build_zone(client)

    response = client.patch(f"/leagues/{league['league_id']}", json={"logo": "liga.png"})
    assert response.status_code == 200
    assert response.json() == {**league, "logo": "liga.png"}
