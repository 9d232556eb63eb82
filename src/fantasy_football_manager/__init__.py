"""Fantasy football league manager: teams, lineups, weekly scoring and standings."""
