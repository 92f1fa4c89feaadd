import logging

import click

from model_demos.infrastructure.cli.demo_commands import (
    finance,
    health,
    inventory,
    run_all,
    students,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Object modeling console demos"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
cli.add_command(finance)
cli.add_command(health)
cli.add_command(inventory)
cli.add_command(students)
cli.add_command(run_all)
