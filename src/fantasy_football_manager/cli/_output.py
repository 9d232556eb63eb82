from rich.console import Console
from rich.table import Table

from fantasy_football_manager.domain.scoring import TeamScore
from fantasy_football_manager.domain.standings import StandingsRow, format_ordinal
from fantasy_football_manager.services.legacy_import import ImportSummary

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {message}")


def print_current_week(week: str) -> None:
    console.print(f"Current week: [bold]{week}[/bold]")


def print_standings(rows: list[StandingsRow], through_week: str | None = None) -> None:
    if not rows:
        console.print("No teams found.")
        return
    title = f"Standings through {through_week}" if through_week else "Standings"
    table = Table(title=title, show_edge=False, pad_edge=False)
    table.add_column("Rank", justify="right")
    table.add_column("Team")
    table.add_column("Record", justify="right")
    table.add_column("Pct", justify="right")
    table.add_column("Streak", justify="right")
    for row in rows:
        table.add_row(
            format_ordinal(row.rank),
            row.team.name,
            row.totals.label(),
            f"{row.totals.win_pct:.3f}",
            row.streak or "-",
        )
    console.print(table)


def print_scoreboard(week: str, scores: list[TeamScore]) -> None:
    if not scores:
        console.print(f"No teams to score for {week}.")
        return
    table = Table(title=f"Scoreboard {week}", show_edge=False, pad_edge=False)
    table.add_column("Team")
    table.add_column("Points", justify="right")
    table.add_column("Top scorer")
    table.add_column("Lineup")
    for score in scores:
        leader = score.leading_scorer
        table.add_row(
            score.team.name,
            f"{score.starter_total:.1f}",
            f"{leader.name} ({score.leading_points:.1f})" if leader else "-",
            score.lineup_source.value,
        )
    console.print(table)


def print_import_summary(summary: ImportSummary) -> None:
    console.print("[bold green]Imported[/bold green] legacy league export")
    console.print(f"  Teams: {summary.teams}")
    console.print(f"  Players: {summary.players}")
    console.print(f"  Weekly lineups: {summary.lineups}")
    if summary.legacy_lineups_migrated:
        console.print(f"  Single lineups moved to week1: {summary.legacy_lineups_migrated}")
    console.print(f"  Matchup weeks: {summary.matchup_weeks}")
    if summary.current_week:
        console.print(f"  Current week: {summary.current_week}")
