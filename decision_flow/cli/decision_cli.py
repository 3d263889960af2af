import click
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from decision_flow.config.problem_config import DecisionProblem
from decision_flow.core.errors import DecisionError
from decision_flow.core.models import TieBreak
from decision_flow.decisions.expected_loss import ExpectedLossSelector
from decision_flow.decisions.sensitivity import (
    break_even_probability,
    summarize_runs,
    sweep_two_hypotheses,
)
from decision_flow.report.loss_report import build_loss_table, save_result

console = Console()
logger = logging.getLogger(__name__)

def setup_logging(verbose: bool) -> None:
    """Configure logging with rich output"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)]
    )

def _load_problem(path: Path) -> DecisionProblem:
    try:
        return DecisionProblem.from_yaml(path)
    except ValidationError as e:
        raise click.ClickException(f"Invalid problem file {path}:\n{e}")

@click.group()
@click.option(
    '--verbose',
    '-v',
    is_flag=True,
    help='Enable verbose logging'
)
def cli(verbose: bool) -> None:
    """Bayesian decision CLI: pick the decision with minimum expected loss"""
    setup_logging(verbose)

@cli.command()
@click.argument('problem', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--tie-break',
    '-t',
    type=click.Choice([t.value for t in TieBreak]),
    default=None,
    help='Override the tie-break policy of the problem file'
)
@click.option(
    '--tolerance',
    type=float,
    default=None,
    help='Override the numeric tolerance of the problem file'
)
@click.option(
    '--output',
    '-o',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write the result as JSON to this file'
)
def choose(
    problem: Path,
    tie_break: Optional[str],
    tolerance: Optional[float],
    output: Optional[Path],
) -> None:
    """Select the decision with minimum expected loss"""
    decision_problem = _load_problem(problem)
    settings = decision_problem.selector

    try:
        selector = ExpectedLossSelector(
            tolerance=settings.tolerance if tolerance is None else tolerance,
            tie_break=settings.tie_break if tie_break is None else tie_break,
        )
        beliefs = decision_problem.beliefs(selector.tolerance)
        logger.debug("Beliefs for %s: %s", decision_problem.name, beliefs)
        result = selector.select(decision_problem.decisions, beliefs)
    except (DecisionError, ValueError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/]")
        raise click.ClickException(str(e))

    names = decision_problem.decision_names
    console.print(build_loss_table(result, names, title=decision_problem.name))
    chosen = ", ".join(names[i] for i in result.chosen_indices)
    console.print(f"[bold green]Chosen: {chosen}[/]")
    if result.is_tie and len(result.chosen_indices) == 1:
        console.print(
            "[yellow]Tie within tolerance: "
            f"{', '.join(names[i] for i in result.tied_indices)}[/]"
        )

    if output is not None:
        save_result(result, output, names)
        console.print(f"[bold green]Result saved to: {output}[/]")

@cli.command()
@click.option(
    '--output',
    '-o',
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help='Path to create the example problem file'
)
def generate_problem(output: Path) -> None:
    """Generate an example decision problem file"""
    DecisionProblem.example().to_yaml(output)
    console.print(f"[bold green]Problem file generated at: {output}[/]")

@cli.command()
@click.argument('problem', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    '--points',
    '-n',
    type=click.IntRange(min=2),
    default=101,
    help='Number of evenly spaced values of P(first hypothesis)'
)
def sweep(problem: Path, points: int) -> None:
    """Show how the choice changes with the belief in a two-hypothesis problem

    Ties are always listed in full; the tie_break setting of the problem
    file is not used here.
    """
    decision_problem = _load_problem(problem)
    names = decision_problem.decision_names
    hypothesis = decision_problem.hypotheses[0]

    try:
        sweep_points = sweep_two_hypotheses(
            decision_problem.decisions,
            num_points=points,
            tie_break=TieBreak.ALL,
            tolerance=decision_problem.selector.tolerance,
        )
    except (DecisionError, ValueError) as e:
        console.print(f"[bold red]Error: {escape(str(e))}[/]")
        raise click.ClickException(str(e))

    table = Table(title=f"{decision_problem.name}: choice by P({hypothesis})")
    table.add_column("From", justify="right")
    table.add_column("To", justify="right")
    table.add_column("Chosen")
    for start, end, indices in summarize_runs(sweep_points):
        table.add_row(f"{start:.4f}", f"{end:.4f}", ", ".join(names[i] for i in indices))
    console.print(table)

    decisions = decision_problem.decisions
    for a in range(len(decisions)):
        for b in range(a + 1, len(decisions)):
            if decisions[a].losses == decisions[b].losses:
                console.print(f"  {names[a]} and {names[b]} tie at every P({hypothesis})")
                continue
            p = break_even_probability(decisions[a].losses, decisions[b].losses)
            if p is not None:
                console.print(
                    f"  {names[a]} and {names[b]} break even at P({hypothesis}) = {p:.4f}"
                )

if __name__ == '__main__':
    cli()
