#!/usr/bin/env python3
"""
Pick'em Management CLI

Command-line access to the scoring engine for organizers setting up events.
"""

import click
from flask import current_app
from flask.cli import with_appcontext

from app import create_app
from app.utils.cache_utils import get_cache_stats
from app.utils.odds import american_to_decimal, decimal_to_american
from app.utils.pick6_scoring import (
    calculate_potential_points,
    format_odds,
    format_points,
    get_fighter_status,
    score_pick6_selection,
)
from app.utils.scoring import calculate_match_points, calculate_match_points_from_american
from app.utils.validation import (
    STRENGTH_TIERS,
    format_american_odds,
    format_odds_ratio,
    get_american_odds_description,
    get_odds_description,
    suggest_american_odds,
    suggest_odds_ratio,
    validate_american_odds,
    validate_odds_ratio,
)

app = create_app()


def _fail(message):
    click.echo(f"❌ {message}")
    raise SystemExit(1)


@click.group()
@click.pass_context
def cli(ctx):
    """Pick'em Management CLI"""
    ctx.with_resource(app.app_context())


# Odds Commands
@cli.group()
def odds():
    """Odds conversion and validation"""
    pass


@odds.command()
@click.option("--american", type=int, help="American odds, e.g. -150 or 200")
@click.option("--decimal", "decimal_odds", type=float, help="Decimal odds ratio, e.g. 2.5")
def convert(american, decimal_odds):
    """Convert between American and decimal odds"""
    if american is None and decimal_odds is None:
        _fail("Provide --american or --decimal")

    if american is not None:
        decimal_odds = american_to_decimal(american)
    else:
        if decimal_odds < 1.0:
            _fail("Decimal odds must be at least 1.0")
        american = decimal_to_american(decimal_odds)

    click.echo(f"American: {format_american_odds(american)}")
    click.echo(f"Decimal:  {decimal_odds:.4f}")
    click.echo(f"Ratio:    {format_odds_ratio(decimal_odds)}")


@odds.command(name="validate")
@click.option("--american", type=int, help="American odds to check")
@click.option("--ratio", type=float, help="Odds ratio to check")
def validate_cmd(american, ratio):
    """Check odds against the accepted ranges"""
    if american is not None:
        result = validate_american_odds(american)
        label = format_american_odds(american)
    elif ratio is not None:
        result = validate_odds_ratio(ratio)
        label = format_odds_ratio(ratio)
    else:
        _fail("Provide --american or --ratio")

    if result.is_valid:
        click.echo(f"✅ {label} is valid")
    else:
        _fail(f"{label}: {result.error}")


@odds.command()
@click.argument("tier", type=click.Choice(STRENGTH_TIERS))
@with_appcontext
def suggest(tier):
    """Suggested odds for a strength tier"""
    base_points = current_app.config["BASE_POINTS"]
    american = suggest_american_odds(tier)
    ratio = suggest_odds_ratio(tier)

    click.echo(f"{tier.title()} favorite")
    click.echo(f"  American: {format_american_odds(american)}")
    click.echo(f"    {get_american_odds_description(american, base_points)}")
    click.echo(f"  Ratio:    {format_odds_ratio(ratio)}")
    click.echo(f"    {get_odds_description(ratio)}")


# Points Commands
@cli.group()
def points():
    """Match-picks point values"""
    pass


@points.command()
@click.argument("odds_ratio", type=float)
def ratio(odds_ratio):
    """Points from an odds ratio (underdog fixed at 1000)"""
    result = calculate_match_points(odds_ratio)
    click.echo(f"Odds: {format_odds_ratio(result.odds_ratio)}")
    click.echo(f"  Favorite: {result.favorite_points} points")
    click.echo(f"  Underdog: {result.underdog_points} points")


@points.command()
@click.argument("american_odds", type=int)
@click.option("--base-points", type=int, help="Points for the pinned side")
@with_appcontext
def american(american_odds, base_points):
    """Balanced points from American odds"""
    validation = validate_american_odds(american_odds)
    if not validation.is_valid:
        _fail(validation.error)

    base_points = base_points or current_app.config["BASE_POINTS"]
    result = calculate_match_points_from_american(american_odds, base_points)

    click.echo(f"Odds: {format_american_odds(result.american_odds)}")
    click.echo(f"  Favorite: {result.favorite_points} points")
    click.echo(f"  Underdog: {result.underdog_points} points")
    click.echo(f"  {get_american_odds_description(american_odds, base_points)}")


# Pick 6 Commands
@cli.group()
def pick6():
    """Pick 6 scoring"""
    pass


@pick6.command()
@click.argument("american_odds", type=int)
@click.option("--lost", is_flag=True, help="The fighter lost")
@click.option(
    "--finish",
    type=click.Choice(["decision", "ko_tko", "submission"]),
    help="How the fight ended",
)
@click.option("--double-down", is_flag=True, help="Double down pick")
def score(american_odds, lost, finish, double_down):
    """Score a Pick 6 selection"""
    result = score_pick6_selection(
        american_odds,
        is_winner=not lost,
        finish_type=finish,
        is_double_down=double_down,
    )

    click.echo(f"{format_odds(american_odds)} ({get_fighter_status(american_odds)})")
    click.echo(f"  Base:        {format_points(result.base_points)}")
    click.echo(f"  Finish:      {format_points(result.finish_bonus)}")
    click.echo(f"  Underdog:    {format_points(result.underdog_bonus)}")
    click.echo(f"  Multiplier:  x{result.double_down_multiplier}")
    click.echo(f"  Total:       {format_points(result.total_points)}")


@pick6.command()
@click.argument("american_odds", type=int)
@click.option("--double-down", is_flag=True, help="Double down pick")
def potential(american_odds, double_down):
    """Maximum points a selection can earn"""
    value = calculate_potential_points(american_odds, double_down)
    click.echo(f"{format_odds(american_odds)}: up to {format_points(value)} points")


@cli.command()
@with_appcontext
def status():
    """Show application configuration"""
    click.echo("Pick'em scoring status")
    click.echo(f"  Base points:     {current_app.config['BASE_POINTS']}")
    click.echo(f"  Pick 6 count:    {current_app.config['PICK6_PICK_COUNT']}")
    cache_stats = get_cache_stats()
    click.echo(f"  Cache:           {cache_stats['type']} ({cache_stats['timeout']}s)")


if __name__ == "__main__":
    cli()
