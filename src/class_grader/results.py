"""JSON result persistence and comparison."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .config import GradeConfig
from .runner import GradingResult

console = Console()


def save_result(result: GradingResult, config: GradeConfig) -> Path:
    """Save a grading result to a timestamped JSON file."""
    output_dir = Path(config.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    filename = f"{result.name}_{timestamp}.json"
    # Sanitize name for filesystem
    filename = filename.replace("/", "_").replace("\\", "_")
    filepath = output_dir / filename

    data = {
        "timestamp": timestamp,
        "config": {
            "seed": config.seed,
            "points_per_correct": config.points_per_correct,
            "shuffle": config.shuffle,
            "max_submissions": config.max_submissions,
        },
        **result.to_dict(),
    }

    filepath.write_text(json.dumps(data, indent=2, default=str))
    console.print(f"  Results saved to [cyan]{filepath}[/]")
    return filepath


def load_result(filepath: Path) -> dict:
    """Load a result JSON file."""
    return json.loads(filepath.read_text())


def compare_results(filepaths: list[Path]) -> None:
    """Display a side-by-side comparison table of multiple result files."""
    results = []
    for fp in filepaths:
        try:
            results.append(load_result(fp))
        except (OSError, json.JSONDecodeError) as e:
            console.print(f"[red]Error loading {fp}:[/] {e}")

    if not results:
        console.print("[red]No valid result files to compare.[/]")
        return

    table = Table(title="Grading Comparison", show_lines=True)
    table.add_column("Metric", style="bold")

    for r in results:
        table.add_column(f"{r.get('name', '?')}\n{r.get('timestamp', '?')}", justify="right")

    table.add_row("Accuracy", *[f"{r.get('accuracy', 0):.4f}" for r in results])
    table.add_row("Submissions", *[str(r.get("num_submissions", 0)) for r in results])

    ci_values = []
    for r in results:
        ci = r.get("confidence_interval")
        ci_values.append(f"[{ci[0]:.4f}, {ci[1]:.4f}]" if ci else "N/A")
    table.add_row("95% CI", *ci_values)

    strategies = sorted({name for r in results for name in r.get("by_strategy", {})})
    for name in strategies:
        values = []
        for r in results:
            v = r.get("by_strategy", {}).get(name)
            values.append(f"{v:.4f}" if v is not None else "N/A")
        table.add_row(f"Accuracy ({name})", *values)

    table.add_row("Score", *[str(r.get("session", {}).get("score", "N/A")) for r in results])
    table.add_row("Best streak", *[str(r.get("session", {}).get("best_streak", "N/A")) for r in results])

    console.print(table)
