"""
CLI-specific formatting functions.

This module handles presentation formatting for the CLI, including:
- Plain text fragments, one per line
- JSON and YAML documents
- Rich tables for visit results and step traces
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "json":
        return json.dumps(data, indent=2, default=str)
    elif format_type == "yaml":
        return yaml.dump(data, default_flow_style=False, default_style=None, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    else:
        return format_text_output(data)


def format_text_output(data: Any) -> str:
    """Format data as plain text lines."""
    if isinstance(data, dict) and "trace" in data:
        return "\n".join(
            f"{entry['step']}: {fragment}"
            for entry in data["trace"]
            for fragment in entry["fragments"]
        )
    elif isinstance(data, dict) and "fragments" in data:
        return "\n".join(data["fragments"])
    elif isinstance(data, dict) and "visits" in data:
        return "\n".join(visit["result"] for visit in data["visits"])
    else:
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "visits" in data:
        return format_visits_table(data["visits"])
    elif isinstance(data, dict) and "trace" in data:
        return format_trace_table(data["trace"])
    else:
        # Fallback to plain text for structures without a table layout
        return format_text_output(data)


def format_visits_table(visits: List[Dict]) -> str:
    """Format visit results as a table."""
    if not visits:
        return "No visits."

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Flower", style="green")
    table.add_column("Visitor", style="cyan")
    table.add_column("Result")

    for visit in visits:
        table.add_row(str(visit["flower"]), str(visit["visitor"]), str(visit["result"]))

    return _render(table)


def format_trace_table(trace: List[Dict]) -> str:
    """Format a step trace as a table, one row per step."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("Step", style="cyan")
    table.add_column("Fragments")

    for index, entry in enumerate(trace, start=1):
        table.add_row(str(index), entry["step"], "\n".join(entry["fragments"]))

    return _render(table)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get()
