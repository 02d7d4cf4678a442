"""
Integration tests for leagues: date rules, status derivation and the join workflow
"""

import pytest

from conftest import auth_headers, days_from_today
from app.core.config import settings
from app.teams.models import Team


@pytest.fixture
def captain_with_team(client, admin_headers, create_team, make_user):
    """A team whose captain is a registered, rostered user"""
    team = create_team(name="Eagles", captain="Alex")
    captain = make_user(name="Alex")
    client.post(f"/teams/{team['teamId']}/players", json={"playerId": captain.user_id}, headers=admin_headers)
    return team, captain


class TestCreateLeague:

    def test_end_before_start_rejected(self, client, user_headers):
        response = client.post(
            "/leagues",
            json={"name": "Spring", "startDate": "2025-01-01", "endDate": "2024-12-31"},
            headers=user_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "endDate must be after startDate"

    def test_equal_dates_rejected(self, client, user_headers):
        response = client.post(
            "/leagues",
            json={"name": "Spring", "startDate": "2030-05-01", "endDate": "2030-05-01"},
            headers=user_headers,
        )
        assert response.status_code == 400

    @pytest.mark.parametrize("start, end", [("2030-13-01", "2030-12-31"), ("tomorrow", "2030-12-31"), ("2030-02-30", "2030-03-01")])
    def test_invalid_dates_rejected(self, client, user_headers, start, end):
        response = client.post(
            "/leagues",
            json={"name": "Spring", "startDate": start, "endDate": end},
            headers=user_headers,
        )
        assert response.status_code == 400
        assert response.json()["message"].startswith("Invalid startDate or endDate format")

    def test_missing_fields(self, client, user_headers):
        response = client.post("/leagues", json={"startDate": "2030-01-01"}, headers=user_headers)
        assert response.status_code == 400
        assert response.json()["message"].startswith("Missing required fields")

    def test_status_is_derived_from_start_date(self, client, user_headers):
        started = client.post(
            "/leagues",
            json={"name": "Running", "startDate": days_from_today(-5), "endDate": days_from_today(30)},
            headers=user_headers,
        )
        future = client.post(
            "/leagues",
            json={"name": "Future", "startDate": days_from_today(5), "endDate": days_from_today(30), "description": " Cup "},
            headers=user_headers,
        )

        assert started.status_code == 201
        assert started.json()["league"]["status"] == "active"
        assert future.json()["league"]["status"] == "upcoming"
        assert future.json()["league"]["description"] == "Cup"

    def test_requires_authentication(self, client):
        response = client.post("/leagues", json={"name": "Spring", "startDate": "2030-01-01", "endDate": "2030-02-01"})
        assert response.status_code == 401
        assert response.json()["message"] == "Access denied. No token provided."


class TestUpdateLeague:

    def test_merged_dates_rechecked(self, client, admin_headers, create_league):
        league = create_league(start_offset=10, end_offset=60)

        response = client.put(
            f"/leagues/{league['leagueId']}",
            json={"endDate": days_from_today(5)},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json()["message"] == "endDate must be after startDate"

    def test_update_fields(self, client, admin_headers, create_league):
        league = create_league()

        response = client.put(
            f"/leagues/{league['leagueId']}",
            json={"name": "Summer League", "status": "active", "description": ""},
            headers=admin_headers,
        )

        assert response.status_code == 200
        updated = response.json()["league"]
        assert updated["leagueName"] == "Summer League"
        assert updated["status"] == "active"
        assert updated["startDate"] == league["startDate"]

    def test_unknown_status_rejected(self, client, admin_headers, create_league):
        league = create_league()
        response = client.put(f"/leagues/{league['leagueId']}", json={"status": "paused"}, headers=admin_headers)
        assert response.status_code == 400

    def test_requires_admin(self, client, user_headers, create_league):
        league = create_league()
        response = client.put(f"/leagues/{league['leagueId']}", json={"name": "X"}, headers=user_headers)
        assert response.status_code == 403

    def test_missing_league(self, client, admin_headers):
        response = client.put("/leagues/L404", json={"name": "X"}, headers=admin_headers)
        assert response.status_code == 404


class TestJoinLeague:

    def test_captain_joins(self, client, captain_with_team, create_league, db_session):
        team, captain = captain_with_team
        league = create_league()

        response = client.post(f"/leagues/{league['leagueId']}/join", headers=auth_headers(captain))

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Successfully joined league"
        assert [t["teamId"] for t in body["league"]["teams"]] == [team["teamId"]]
        assert db_session.get(Team, team["teamId"]).current_league_id == league["leagueId"]

    def test_non_captain_member_forbidden_by_default(
        self, client, admin_headers, captain_with_team, create_league, make_user
    ):
        team, _ = captain_with_team
        member = make_user(name="Robin")
        client.post(f"/teams/{team['teamId']}/players", json={"playerId": member.user_id}, headers=admin_headers)
        league = create_league()

        response = client.post(f"/leagues/{league['leagueId']}/join", headers=auth_headers(member))

        assert response.status_code == 403
        assert response.json()["message"] == "Only team captains can join leagues"

    def test_member_policy_admits_any_member(
        self, client, admin_headers, captain_with_team, create_league, make_user, monkeypatch
    ):
        monkeypatch.setattr(settings, "LEAGUE_JOIN_POLICY", "member")
        team, _ = captain_with_team
        member = make_user(name="Robin")
        client.post(f"/teams/{team['teamId']}/players", json={"playerId": member.user_id}, headers=admin_headers)
        league = create_league()

        response = client.post(f"/leagues/{league['leagueId']}/join", headers=auth_headers(member))

        assert response.status_code == 200

    def test_user_without_team(self, client, user_headers, create_league):
        league = create_league()
        response = client.post(f"/leagues/{league['leagueId']}/join", headers=user_headers)
        assert response.status_code == 400
        assert response.json()["message"] == "You must be part of a team to join a league"

    def test_already_in_this_league(self, client, captain_with_team, create_league):
        _, captain = captain_with_team
        league = create_league()
        client.post(f"/leagues/{league['leagueId']}/join", headers=auth_headers(captain))

        response = client.post(f"/leagues/{league['leagueId']}/join", headers=auth_headers(captain))

        assert response.status_code == 400
        assert response.json()["message"] == "Team is already in this league"

    def test_one_open_league_at_a_time(self, client, captain_with_team, create_league):
        _, captain = captain_with_team
        first = create_league(name="First")
        second = create_league(name="Second")
        client.post(f"/leagues/{first['leagueId']}/join", headers=auth_headers(captain))

        response = client.post(f"/leagues/{second['leagueId']}/join", headers=auth_headers(captain))

        assert response.status_code == 400
        assert response.json()["message"] == "Team is already participating in another league"

    def test_can_move_on_after_league_completes(self, client, admin_headers, captain_with_team, create_league):
        team, captain = captain_with_team
        first = create_league(name="First")
        second = create_league(name="Second")
        client.post(f"/leagues/{first['leagueId']}/join", headers=auth_headers(captain))
        client.put(f"/leagues/{first['leagueId']}", json={"status": "completed"}, headers=admin_headers)

        response = client.post(f"/leagues/{second['leagueId']}/join", headers=auth_headers(captain))

        assert response.status_code == 200
        assert client.get(f"/teams/{team['teamId']}").json()["currentLeagueId"] == second["leagueId"]

    def test_completed_league_cannot_be_joined(self, client, admin_headers, captain_with_team, create_league):
        _, captain = captain_with_team
        league = create_league()
        client.put(f"/leagues/{league['leagueId']}", json={"status": "completed"}, headers=admin_headers)

        response = client.post(f"/leagues/{league['leagueId']}/join", headers=auth_headers(captain))

        assert response.status_code == 400
        assert response.json()["message"] == "Cannot join a completed league"

    def test_missing_league(self, client, user_headers):
        response = client.post("/leagues/L404/join", headers=user_headers)
        assert response.status_code == 404


class TestDeleteLeague:

    def test_delete_releases_member_teams(self, client, admin_headers, captain_with_team, create_league):
        team, captain = captain_with_team
        league = create_league()
        client.post(f"/leagues/{league['leagueId']}/join", headers=auth_headers(captain))

        response = client.delete(f"/leagues/{league['leagueId']}", headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["message"] == "League deleted successfully"
        assert client.get(f"/teams/{team['teamId']}").json()["currentLeagueId"] is None
        assert client.get(f"/leagues/{league['leagueId']}").status_code == 404

    def test_list_leagues(self, client, create_league):
        create_league(name="Older")
        create_league(name="Newer")
        assert [league["leagueName"] for league in client.get("/leagues").json()] == ["Newer", "Older"]
