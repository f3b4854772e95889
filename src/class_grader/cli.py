"""Click CLI entry point."""

from __future__ import annotations

import random
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import CategoryRequirement, GradeConfig
from .errors import InvalidArgument

console = Console()


def _parse_require(values: tuple[str, ...]) -> dict[str, CategoryRequirement]:
    """``padding`` or ``background=blue,red`` -> requirement map."""
    requirements: dict[str, CategoryRequirement] = {}
    for item in values:
        name, _, specific = item.partition("=")
        name = name.strip().lower()
        if not name:
            raise click.BadParameter(f"missing category name in {item!r}", param_hint="--require")
        specific_values = [v.strip() for v in specific.split(",") if v.strip()] or None
        requirements[name] = CategoryRequirement(required=True, specific_values=specific_values)
    return requirements


@click.group()
@click.option("--seed", default=None, type=int, help="Seed for example classes in feedback.")
@click.pass_context
def cli(ctx: click.Context, seed: int | None) -> None:
    """Class Grader: check utility-class answers and explain what is missing."""
    ctx.ensure_object(dict)
    ctx.obj["seed"] = seed


@cli.command()
@click.argument("user_input")
@click.option("--answer", "answers", multiple=True, help="A correct answer (repeatable).")
@click.option("--pattern", "patterns", multiple=True, help="Required class or prefix like 'bg-' (repeatable).")
@click.option("--require", "require", multiple=True,
              help="Required category, optionally with values: 'padding' or 'background=blue,red'.")
@click.pass_context
def check(
    ctx: click.Context,
    user_input: str,
    answers: tuple[str, ...],
    patterns: tuple[str, ...],
    require: tuple[str, ...],
) -> None:
    """Check USER_INPUT against answers, patterns or category requirements."""
    from .matcher import ClassMatcher

    given = [bool(answers), bool(patterns), bool(require)]
    if sum(given) != 1:
        raise click.UsageError("Pass exactly one of --answer, --pattern or --require.")

    matcher = ClassMatcher(random.Random(ctx.obj["seed"]))
    try:
        if answers:
            verdict = matcher.check_answers(user_input, list(answers))
        elif patterns:
            verdict = matcher.check_patterns(user_input, list(patterns))
        else:
            verdict = matcher.categorize_and_validate(user_input, _parse_require(require))
    except InvalidArgument as e:
        raise click.UsageError(str(e))

    if verdict.is_valid:
        console.print(f"[green]{escape(verdict.feedback)}[/]")
    else:
        console.print(f"[red]{escape(verdict.feedback)}[/]")
        raise SystemExit(1)


@cli.command()
@click.argument("user_input")
def categorize(user_input: str) -> None:
    """Show which category each class in USER_INPUT falls into."""
    from .matcher import ClassMatcher

    buckets = ClassMatcher().categorize(user_input)
    table = Table(title="Categories")
    table.add_column("Category", style="bold cyan")
    table.add_column("Classes")

    for name, tokens in buckets.items():
        table.add_row(name, escape(" ".join(tokens)))

    console.print(table)


@cli.command("strategies")
def list_strategies_cmd() -> None:
    """List all available matching strategies."""
    from .strategies import list_strategies

    table = Table(title="Matching Strategies")
    table.add_column("Name", style="bold cyan")
    table.add_column("Description")

    for s in list_strategies():
        table.add_row(s["name"], s["description"])

    console.print(table)


@cli.command()
@click.argument("challenges_file", type=click.Path(exists=True, dir_okay=False))
@click.argument("submissions_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--name", default="grading", help="Label for this run.")
@click.option("--points", default=10, type=int, help="Points per correct submission.")
@click.option("--shuffle", "shuffle_", is_flag=True, help="Grade submissions in random order.")
@click.option("--max-submissions", default=None, type=int, help="Limit the number graded.")
@click.option("--output-dir", default="results", help="Directory for result files.")
@click.option("--no-save", is_flag=True, help="Do not write a result file.")
@click.pass_context
def grade(
    ctx: click.Context,
    challenges_file: str,
    submissions_file: str,
    name: str,
    points: int,
    shuffle_: bool,
    max_submissions: int | None,
    output_dir: str,
    no_save: bool,
) -> None:
    """Grade every submission in SUBMISSIONS_FILE against CHALLENGES_FILE."""
    from .results import save_result
    from .runner import GradingRunner, load_challenges, load_submissions

    try:
        config = GradeConfig(
            seed=ctx.obj["seed"],
            points_per_correct=points,
            shuffle=shuffle_,
            max_submissions=max_submissions,
            output_dir=Path(output_dir),
        )
        challenges = load_challenges(Path(challenges_file))
        submissions = load_submissions(Path(submissions_file))
    except ValidationError as e:
        console.print(f"[red]Invalid input:[/] {escape(str(e))}")
        raise SystemExit(1)

    result = GradingRunner(config).run(challenges, submissions, name=name)
    if not no_save:
        save_result(result, config)


@cli.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True))
def compare(files: tuple[str, ...]) -> None:
    """Compare results from multiple grading runs."""
    from .results import compare_results

    compare_results([Path(f) for f in files])
