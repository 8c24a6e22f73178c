def goal_difference(standing) -> int:
    return standing.goals_for - standing.goals_against


def rank_standings(standings):
    """
    Order standings for a table: points, then goal difference, then goals scored,
    all descending. `sorted` is stable, so full ties keep their input order.
    """
    return sorted(
        standings,
        key=lambda s: (-s.points, -goal_difference(s), -s.goals_for),
    )
