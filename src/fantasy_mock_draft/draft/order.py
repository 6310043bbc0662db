"""Snake (boustrophedon) pick order. Team indices and pick numbers are 1-based."""


def _check(overall_pick: int, teams: int) -> None:
    if teams < 1:
        msg = f"teams must be positive, got {teams}"
        raise ValueError(msg)
    if overall_pick < 1:
        msg = f"overall_pick must be positive, got {overall_pick}"
        raise ValueError(msg)


def round_for_pick(overall_pick: int, teams: int) -> int:
    _check(overall_pick, teams)
    return (overall_pick - 1) // teams + 1


def pick_in_round(overall_pick: int, teams: int) -> int:
    return overall_pick - (round_for_pick(overall_pick, teams) - 1) * teams


def team_on_clock(overall_pick: int, teams: int) -> int:
    """Return the team index picking at ``overall_pick``: ascending in odd rounds, descending in even."""
    position = pick_in_round(overall_pick, teams)
    if round_for_pick(overall_pick, teams) % 2 == 1:
        return position
    return teams - position + 1


def snake_order(teams: int, rounds: int) -> list[int]:
    """Return team indices for every pick: 1..n, n..1, ..."""
    return [team_on_clock(pick, teams) for pick in range(1, teams * rounds + 1)]
