from types import SimpleNamespace
from league_admin.standings.schemas.standing_schema import StandingPatch
from league_admin.standings.services.standing_ranking import rank_standings
from league_admin.standings.services.standing_service import StandingService
from league_admin.standings.services.standing_export_service import StandingExportService, CSV_COLUMNS
from league_admin.matches.services.match_result_service import MatchResultService


def row(name, points, goals_for, goals_against):
    return SimpleNamespace(name=name, points=points, goals_for=goals_for, goals_against=goals_against)


def names(standings):
    return [s.name for s in standings]


def test_ranking_by_points_then_difference_then_goals():
    table = [
        row("low", 1, 5, 5),
        row("diff", 4, 3, 1),
        row("goals", 4, 6, 4),
        row("top", 7, 2, 2),
    ]
    assert names(rank_standings(table)) == ["top", "goals", "diff", "low"]


def test_ranking_keeps_input_order_on_full_ties():
    table = [row("first", 3, 2, 1), row("second", 3, 2, 1), row("third", 3, 2, 1)]
    assert names(rank_standings(table)) == ["first", "second", "third"]
    assert names(rank_standings(list(reversed(table)))) == ["third", "second", "first"]


def test_ranking_does_not_touch_its_input():
    table = [row("b", 0, 0, 0), row("a", 3, 1, 0)]
    ranked = rank_standings(table)
    assert names(table) == ["b", "a"]
    assert names(ranked) == ["a", "b"]


def test_update_standing_recomputes_derived_totals(db, build, zone):
    team = build.team(zone, "A")
    standing = StandingService(db).standings_of(zone.zone_id)[0]

    StandingService(db).update_standing(standing.standing_id, StandingPatch(won=2, drawn=1, goals_for=7))

    corrected = StandingService(db).get_standing_for(team.team_id, zone.zone_id)
    assert (corrected.played, corrected.points, corrected.goals_for) == (3, 7, 7)


def test_update_missing_standing_is_a_noop(db):
    assert StandingService(db).update_standing("S42", StandingPatch(won=1)) is None


def test_csv_export_lists_ranked_teams(db, build, zone):
    a, b = build.team(zone, "Club A"), build.team(zone, "Club, B")
    fixture = build.fixture(zone, [(a, b)])
    MatchResultService(db).record_result(fixture.matches[0].match_id, 0, 2)

    filename, content = StandingExportService(db).export_standings_csv(zone.zone_id)

    assert filename == f"posiciones_{zone.league_id}_{zone.category_id}_{zone.zone_id}.csv"
    lines = content.splitlines()
    assert lines[0] == ",".join(CSV_COLUMNS)
    assert lines[1] == '1,"Club, B",1,1,0,0,2,0,2,3'
    assert lines[2] == "2,Club A,1,0,0,1,0,2,-2,0"


def test_csv_export_of_empty_zone(db, zone):
    assert StandingExportService(db).export_standings_csv(zone.zone_id) is None
