"""CLI commands, one per demo."""

from __future__ import annotations

from pathlib import Path

import click

from model_demos.domain.exceptions import DomainException
from model_demos.infrastructure import bootstrap
from model_demos.infrastructure.bootstrap import (
    REPORT_FILE,
    STUDENTS_FILE,
    finance_app,
    health_system_app,
    seed_sample_students,
    student_report_handler,
    warehouse_manager,
)


def _echo_lines(lines: list[str]) -> None:
    for line in lines:
        click.echo(line)
    click.echo()


@click.command("finance")
def finance() -> None:
    """Process transactions against a savings account."""
    try:
        _echo_lines(finance_app().run())
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("health")
def health() -> None:
    """Look up patients and their prescriptions."""
    try:
        _echo_lines(health_system_app().run())
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("inventory")
def inventory() -> None:
    """Manage electronics and grocery stock in a warehouse."""
    try:
        _echo_lines(warehouse_manager().run())
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("students")
@click.option(
    "--input", "input_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=STUDENTS_FILE, show_default=True,
    help="Comma-separated 'id,name,score' records.",
)
@click.option(
    "--output", "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=REPORT_FILE, show_default=True,
    help="Where to write the grade report.",
)
@click.option(
    "--seed-sample", is_flag=True,
    help="Create the input file with sample records if it does not exist.",
)
def students(input_path: Path, output_path: Path, seed_sample: bool) -> None:
    """Read student scores from a file and write a grade report."""
    if seed_sample and seed_sample_students(input_path):
        click.echo(f"Sample records written to {input_path}")
    _echo_lines(student_report_handler(input_path, output_path).run())


@click.command("all")
@click.pass_context
def run_all(ctx: click.Context) -> None:
    """Run every demo in turn."""
    ctx.invoke(finance)
    ctx.invoke(health)
    ctx.invoke(inventory)
    ctx.invoke(
        students,
        input_path=bootstrap.STUDENTS_FILE,
        output_path=bootstrap.REPORT_FILE,
        seed_sample=True,
    )
