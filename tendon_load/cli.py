"""
CLI interface for the tendon load calculator.

Usage:
    tli evaluate session.yaml
    tli evaluate session.json --output json --average 1500
    tli template --mode grade-fraction > session.yaml
"""

import sys

import click

from tendon_load.config import setup_logging
from tendon_load.features.bouldering.schemas import (
    BoulderingRequest,
    ClimbInput,
    GradeFractionRequest,
    PerClimbRequest,
)
from tendon_load.features.hangboard.schemas import HangboardRowInput
from tendon_load.features.session.schemas import SessionRequest
from tendon_load.features.session.service import SessionService
from tendon_load.loader import SessionFileError, dump_session_yaml, load_session_file
from tendon_load.report import ReportGenerator
from tendon_load.shared.calculator_types import BoulderingMode


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override TLI_LOG_LEVEL"
)
def cli(log_level):
    """Tendon Load Index for bouldering and hangboard sessions."""
    # stderr keeps --output json clean
    setup_logging(log_level, stream=sys.stderr)


@cli.command()
@click.argument("session_file", type=click.Path(dir_okay=False))
@click.option(
    "--output",
    default="console",
    type=click.Choice(["console", "json"]),
    help="Output format"
)
@click.option(
    "--average",
    default=None,
    type=click.FloatRange(min=0),
    help="4-week average TLI (overrides the file)"
)
def evaluate(session_file, output, average):
    """Evaluate a session described in a YAML or JSON file."""
    try:
        request = load_session_file(session_file)
    except SessionFileError as e:
        raise click.ClickException(str(e))

    if average is not None:
        request = request.model_copy(update={"historical_average": average})

    report = SessionService.evaluate(request)
    generator = ReportGenerator()

    if output == "json":
        click.echo(generator.generate_json(report))
    else:
        click.echo(generator.generate_console(report))


def build_template(mode: BoulderingMode) -> SessionRequest:
    """Starter session with default values for the given bouldering mode."""
    if mode == BoulderingMode.GRADE_FRACTION:
        bouldering = BoulderingRequest(
            mode=mode,
            grade_fraction=GradeFractionRequest(),
        )
    else:
        bouldering = BoulderingRequest(
            mode=mode,
            per_climb=PerClimbRequest(climbs=[
                ClimbInput(grade=6, tut_sec=25),
                ClimbInput(grade=7, tut_sec=30),
                ClimbInput(grade=8, tut_sec=35),
            ]),
        )
    return SessionRequest(bouldering=bouldering, hangboard=[HangboardRowInput()])


@cli.command()
@click.option(
    "--mode",
    default="per-climb",
    type=click.Choice(["per-climb", "grade-fraction"]),
    help="Bouldering input mode"
)
def template(mode):
    """Print a starter session file (YAML)."""
    bouldering_mode = (
        BoulderingMode.GRADE_FRACTION if mode == "grade-fraction" else BoulderingMode.PER_CLIMB
    )
    click.echo(dump_session_yaml(build_template(bouldering_mode)), nl=False)


if __name__ == "__main__":
    cli()
