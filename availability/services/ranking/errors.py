class RankingInvariantError(RuntimeError):
    """An option went missing from a ranking it must appear in."""
