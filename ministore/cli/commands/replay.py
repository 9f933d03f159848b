"""
Replay command: dispatch a JSONL action file through a reducer
"""

import json
from typing import Any, Dict, Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ...core.actions import action_type
from ...core.canonical import canonicalize, compute_state_hash
from ...replay import replay as replay_actions
from .._loader import load_reducer, read_actions

console = Console()


def replay_command(
    reducer_ref: str = typer.Argument(..., help="Reducer as 'module:attribute'"),
    actions_path: str = typer.Option(..., "--actions", "-a", help="Path to JSONL action file"),
    initial: Optional[str] = typer.Option(None, "--initial", "-i", help="Initial state as JSON"),
    until: Optional[int] = typer.Option(
        None, "--until", "-u", help="Replay until action index (inclusive)"
    ),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay actions through a reducer and report the resulting state.

    Examples:
        ministore replay myapp.reducers:root --actions actions.jsonl
        ministore replay myapp.reducers:root -a actions.jsonl --until 10
        ministore replay myapp.reducers:root -a actions.jsonl --show-state --json
    """
    try:
        reducer = load_reducer(reducer_ref)
        actions = read_actions(actions_path)
        preloaded_state = json.loads(initial) if initial is not None else None

        if not json_output:
            console.print("[bold]Replaying actions...[/bold]")

        result = replay_actions(reducer, actions, preloaded_state, to_index=until)
        state_hash = compute_state_hash(result.state)

        type_counts: Dict[str, int] = {}
        for action in actions[: result.applied]:
            key = str(action_type(action))
            type_counts[key] = type_counts.get(key, 0) + 1
    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Action file not found", "path": actions_path}))
        else:
            console.print(f"[red]Error: Action file not found:[/red] {actions_path}")
        raise typer.Exit(2)
    except Exception as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        output: Dict[str, Any] = {
            "success": True,
            "actions_replayed": result.applied,
            "state_hash": state_hash,
            "action_counts": type_counts,
        }
        if show_state:
            output["state"] = canonicalize(result.state)
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Replayed {result.applied} actions successfully[/green]")
    console.print(f"  State hash: [yellow]{state_hash}[/yellow]")

    table = Table(title="Action Counts")
    table.add_column("Action Type", style="green")
    table.add_column("Count", style="cyan", justify="right")
    for type_name in sorted(type_counts.keys()):
        table.add_row(type_name, str(type_counts[type_name]))
    console.print(table)

    if show_state:
        console.print("\n[bold]Final State:[/bold]")
        syntax_str = json.dumps(canonicalize(result.state), indent=2)
        console.print(Syntax(syntax_str, "json", theme="monokai"))
