"""
Tests for the scoring API blueprint.
"""
import pytest


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json()["status"] == "ok"


def test_unknown_route_returns_json_404(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Resource not found"}


def test_convert_american_odds(client):
    response = client.post("/api/odds/convert", json={"american_odds": -150})
    data = response.get_json()
    assert response.status_code == 200
    assert data["decimal_odds"] == pytest.approx(1.6667)
    assert data["american_odds"] == -150
    assert data["implied_probability"] == pytest.approx(0.6)
    assert data["display"] == "-150"


def test_convert_decimal_odds(client):
    response = client.post("/api/odds/convert", json={"decimal_odds": 2.5})
    data = response.get_json()
    assert data["american_odds"] == 150
    assert data["ratio_display"] == "2.5:1"


def test_convert_pick_em(client):
    data = client.post("/api/odds/convert", json={"american_odds": 0}).get_json()
    assert data["decimal_odds"] == 1.0
    assert data["implied_probability"] is None
    assert data["display"] == "Even (Pick-em)"


def test_convert_requires_input(client):
    response = client.post("/api/odds/convert", json={})
    assert response.status_code == 400
    assert response.get_json()["code"] == "VALIDATION_ERROR"


def test_convert_rejects_non_json(client):
    response = client.post("/api/odds/convert", data="not json")
    assert response.status_code == 400
    assert response.get_json()["error"] == "Request body must be a JSON object"


def test_convert_rejects_garbage_number(client):
    response = client.post("/api/odds/convert", json={"american_odds": "abc"})
    assert response.status_code == 400
    assert response.get_json()["field"] == "american_odds"


def test_validate_odds_query(client):
    data = client.get("/api/odds/validate?american_odds=50").get_json()
    assert data["is_valid"] is False
    assert data["error"].startswith("Positive odds")

    data = client.get("/api/odds/validate?odds_ratio=3").get_json()
    assert data["is_valid"] is True


def test_suggest_odds(client):
    response = client.get("/api/odds/suggest/moderate")
    data = response.get_json()
    assert data["american_odds"] == -300
    assert data["odds_ratio"] == 3.0
    assert data["ratio_description"].startswith("Moderate favorite")

    # Second call is served from the cache
    assert client.get("/api/odds/suggest/moderate").get_json() == data


def test_suggest_unknown_tier(client):
    assert client.get("/api/odds/suggest/huge").status_code == 400


def test_ratio_points(client):
    data = client.post("/api/points/ratio", json={"odds_ratio": 9}).get_json()
    assert data["favorite_points"] == 111
    assert data["underdog_points"] == 1000
    assert data["display"] == "9:1"
    assert "favorite" not in data


def test_american_points_with_favorite(client):
    data = client.post(
        "/api/points/american", json={"american_odds": -150, "favorite": "B"}
    ).get_json()
    assert data["favorite_points"] == 666
    assert data["underdog_points"] == 1000
    assert data["favorite"] == "B"
    assert data["side_a_points"] == 1000
    assert data["side_b_points"] == 666


def test_american_points_uses_configured_base(client, app):
    app.config["BASE_POINTS"] = 500
    data = client.post("/api/points/american", json={"american_odds": 0}).get_json()
    assert data["favorite_points"] == 500
    assert data["underdog_points"] == 500
    assert data["american_odds"] == 0


def test_match_preview_balanced(client):
    response = client.post(
        "/api/matches/preview",
        json={
            "weight_class": "125 lbs",
            "wrestler_a": "John Doe",
            "wrestler_b": "Jane Smith",
            "match_order": 1,
            "favorite": "A",
            "american_odds": -300,
        },
    )
    data = response.get_json()
    assert response.status_code == 200
    assert data["favorite_points"] == 333
    assert data["picking_points"] == {"side_a_points": 333, "side_b_points": 1000}
    assert data["roles"] == {"A": "favorite", "B": "underdog"}


def test_match_preview_pick6(client):
    data = client.post(
        "/api/matches/preview",
        data={
            "weight_class": "Lightweight",
            "wrestler_a": "Fighter One",
            "wrestler_b": "Fighter Two",
            "match_order": "2",
            "contest_type": "pick_6",
            "american_odds_a": "-200",
            "american_odds_b": "170",
        },
    ).get_json()
    assert data["status_a"] == "Favorite"
    assert data["status_b"] == "Underdog"
    assert data["potential_points"]["side_a_points"] == pytest.approx(100.0)
    assert data["potential_points"]["side_b_points"] == pytest.approx(237.0)


def test_match_preview_rejects_bad_form(client):
    response = client.post(
        "/api/matches/preview",
        json={
            "weight_class": "125 lbs",
            "wrestler_a": "Same Name",
            "wrestler_b": "same name",
            "match_order": 30,
            "american_odds": 50,
        },
    )
    errors = response.get_json()["errors"]
    assert response.status_code == 400
    assert errors["wrestler_b"] == ["Wrestler names must be different"]
    assert "match_order" in errors
    assert errors["american_odds"] == [
        "Positive odds must be 100 or greater (e.g., +100, +150)"
    ]


def test_score_pick(client):
    match = {"id": "m1", "favorite": "A", "favorite_points": 333, "underdog_points": 1000, "winner": "B"}
    data = client.post(
        "/api/picks/score", json={"match": match, "pick": {"match_id": "m1", "selected_side": "B"}}
    ).get_json()
    assert data == {"points": 1000, "role": "underdog"}


def test_score_pick_requires_match(client):
    response = client.post("/api/picks/score", json={"pick": {"selected_side": "A"}})
    assert response.status_code == 400
    assert response.get_json()["field"] == "match"


def test_event_potential(client):
    data = client.post("/api/events/potential", json={"matches": []}).get_json()
    assert data == {"max_possible": 0, "min_possible": 0, "all_favorites": 0, "all_underdogs": 0}

    data = client.post("/api/events/potential", json={"matches": [{"id": "m1"}]}).get_json()
    assert data == {
        "max_possible": 500,
        "min_possible": 500,
        "all_favorites": 500,
        "all_underdogs": 500,
    }


def test_event_score(client):
    matches = [{"id": "m1", "winner": "A"}, {"id": "m2", "winner": "B"}]
    picks = [{"match_id": "m1", "selected_side": "A"}, {"match_id": "m2", "selected_side": "A"}]
    data = client.post("/api/events/score", json={"matches": matches, "picks": picks}).get_json()
    assert data == {"total_points": 500, "correct_picks": 1, "total_picks": 2}


def test_pick6_score(client):
    data = client.post(
        "/api/pick6/score",
        json={"american_odds": 150, "is_winner": True, "finish_type": "ko_tko", "is_double_down": True},
    ).get_json()
    assert data["total_points"] == pytest.approx(430.0)
    assert data["display"] == "430.0"


def test_pick6_score_bad_finish(client):
    response = client.post(
        "/api/pick6/score",
        json={"american_odds": 150, "is_winner": True, "finish_type": "dq"},
    )
    assert response.status_code == 400


def test_pick6_potential(client):
    data = client.post("/api/pick6/potential", json={"american_odds": -150}).get_json()
    assert data["potential_points"] == pytest.approx(116.7)
    assert data["odds_display"] == "-150"
    assert data["status"] == "Favorite"


def test_pick6_validate(client):
    picks = [{"match_id": f"m{i}", "fighter_side": "A", "american_odds": -110} for i in range(6)]
    assert client.post("/api/pick6/validate", json={"picks": picks}).get_json()["is_valid"]

    picks[5]["match_id"] = "m0"
    data = client.post("/api/pick6/validate", json={"picks": picks}).get_json()
    assert data["is_valid"] is False
    assert data["errors"] == ["Cannot select multiple fighters from the same fight"]


def test_pick6_entry(client):
    matches = [{"id": "m1", "winner": "A", "finish_type": "submission"}, {"id": "m2"}]
    picks = [
        {"match_id": "m1", "fighter_side": "A", "american_odds": 200, "is_double_down": True},
        {"match_id": "m2", "fighter_side": "B", "american_odds": -150},
    ]
    data = client.post("/api/pick6/entry", json={"matches": matches, "picks": picks}).get_json()
    assert data["total_points"] == pytest.approx(540.0)
    assert data["picks_correct"] == 1
    assert data["is_complete"] is False
    assert data["selections"][0]["match_id"] == "m1"
    assert data["selections"][1]["total_points"] == 0


def test_match_preview_logs_rejected_match(client, caplog):
    client.post(
        "/api/matches/preview",
        json={
            "weight_class": "Lightweight",
            "wrestler_a": "Fighter One",
            "wrestler_b": "Fighter Two",
            "match_order": 30,
            "contest_type": "pick_6",
        },
    )
    assert "Rejected match form" in caplog.text
    assert "[pick_6 #30 Fighter One vs Fighter Two]" in caplog.text
