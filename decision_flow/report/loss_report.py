import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from rich.table import Table

from ..core.models import SelectionResult

logger = logging.getLogger(__name__)


def _name(names: Optional[Sequence[str]], index: int) -> str:
    if names is not None and index < len(names):
        return names[index]
    return f"#{index}"


def build_loss_table(
    result: SelectionResult,
    names: Optional[Sequence[str]] = None,
    title: str = "Expected loss",
) -> Table:
    """One row per decision: id, name, expected loss and whether it was chosen"""
    table = Table(title=title)
    table.add_column("Decision", justify="right")
    table.add_column("Name")
    table.add_column("Expected loss", justify="right")
    table.add_column("Chosen", justify="center")

    chosen = set(result.chosen_indices)
    for entry in result.loss_table:
        is_chosen = entry.index in chosen
        table.add_row(
            str(entry.index),
            _name(names, entry.index),
            f"{entry.expected_loss:.6g}",
            "*" if is_chosen else "",
            style="bold green" if is_chosen else None,
        )
    return table


def result_to_dict(
    result: SelectionResult, names: Optional[Sequence[str]] = None
) -> Dict[str, Any]:
    """JSON-ready summary of a selection"""
    chosen = set(result.chosen_indices)
    rows: List[Dict[str, Any]] = [
        {
            "index": entry.index,
            "name": _name(names, entry.index),
            "expected_loss": entry.expected_loss,
            "chosen": entry.index in chosen,
        }
        for entry in result.loss_table
    ]
    return {
        "chosen": [_name(names, i) for i in result.chosen_indices],
        "chosen_indices": list(result.chosen_indices),
        "expected_losses": list(result.expected_losses),
        "tie_break": result.tie_break.value,
        "tied_indices": list(result.tied_indices),
        "loss_table": rows,
        "timestamp": datetime.now().isoformat(),
    }


def save_result(
    result: SelectionResult, path: Path, names: Optional[Sequence[str]] = None
) -> Path:
    """Write the selection summary as JSON"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(result_to_dict(result, names), f, indent=2)
    logger.info("Result saved to %s", path)
    return path
