"""
CLI Resolution Commands

resolve, hierarchy, dangling
"""

from pathlib import Path
from typing import Any, Dict, List

import typer
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from docgraph.logging_config import logger
from docgraph.cli.config import CLIConfig
from docgraph.exceptions import ProjectLoadError
from docgraph.loader import load_project
from docgraph.models import Declaration, Project, ReflectionKind
from docgraph.resolution import get_resolution_stats, iter_dangling_references, resolve_project
from .output import get_console, print_error, print_json

console = get_console()


def load_and_resolve(project_file: Path) -> Project:
    """
    Load a project description and run the resolve phase over it.

    Raises:
        typer.Exit: If the description cannot be loaded
    """
    try:
        project = load_project(project_file)
    except ProjectLoadError as e:
        logger.error(str(e))
        print_error(str(e))
        raise typer.Exit(code=1)

    resolve_project(project)
    return project


def hierarchy_tree(reflection: Declaration) -> Tree:
    """Render a declaration's hierarchy chain as nested rich tree levels."""
    tree = Tree(f"[bold]{escape(reflection.full_name)}[/bold] [dim]({reflection.kind.name.lower()})[/dim]")
    node = tree
    level = reflection.type_hierarchy
    while level is not None:
        label = ", ".join(str(t) for t in level.types)
        if level.is_target:
            label = f"[bold cyan]{escape(label)}[/bold cyan]"
        else:
            label = escape(label)
        node = node.add(label)
        level = level.next

    if reflection.implemented_types:
        tree.add("implements: " + escape(", ".join(str(t) for t in reflection.implemented_types)))
    if reflection.implemented_by:
        tree.add("implemented by: " + escape(", ".join(str(t) for t in reflection.implemented_by)))
    return tree


def resolve_cmd(
    project_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Project description (JSON)."),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    Resolve all type references of a project and show the resulting hierarchies.
    """
    project = load_and_resolve(project_file)
    stats = get_resolution_stats(project)
    classes = project.get_reflections_by_kind(ReflectionKind.CLASS_OR_INTERFACE)

    if CLIConfig.is_machine_mode() or json_output:
        print_json({
            "project": project.name,
            "stats": stats,
            "declarations": [r.to_dict() for r in classes],
        })
        return

    table = Table(title=f"Resolution of '{project.name}'")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    for key, value in stats.items():
        table.add_row(key.replace("_", " "), f"{value:.0%}" if isinstance(value, float) else str(value))
    console.print(table)

    for reflection in classes:
        console.print(hierarchy_tree(reflection))


def hierarchy_cmd(
    project_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Project description (JSON)."),
    name: str = typer.Argument(..., help="Dotted name of the class or interface."),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    Display the hierarchy chain of one class or interface.
    """
    project = load_and_resolve(project_file)
    reflection = project.find_reflection_by_name(name)

    if reflection is None or not reflection.kind_of(ReflectionKind.CLASS_OR_INTERFACE):
        print_error(f"No class or interface named '{name}'")
        raise typer.Exit(code=1)

    if CLIConfig.is_machine_mode() or json_output:
        print_json(reflection.to_dict())
        return

    console.print(hierarchy_tree(reflection))


def dangling_cmd(
    project_file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="Project description (JSON)."),
    json_output: bool = typer.Option(False, "--json", help="Output results as JSON."),
):
    """
    List type references that could not be linked to a declaration.
    """
    project = load_and_resolve(project_file)
    rows: List[Dict[str, Any]] = [
        {"declaration": reflection.full_name, "reference": reference.name}
        for reflection, reference in iter_dangling_references(project)
    ]

    if CLIConfig.is_machine_mode() or json_output:
        print_json({"dangling": rows, "count": len(rows)})
        return

    if not rows:
        console.print("[green]All references resolved.[/green]")
        return

    table = Table(title=f"Dangling references ({len(rows)})")
    table.add_column("Declaration", style="cyan")
    table.add_column("Reference", style="yellow")
    for row in rows:
        table.add_row(escape(row["declaration"]), escape(row["reference"]))
    console.print(table)
