import typer

from docgraph import __version__
from docgraph.logging_config import logger, setup_logging
from docgraph.cli import resolve
from docgraph.cli.config import CLIConfig

app = typer.Typer()


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: pretty output with tables and trees (also via DOCGRAPH_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
):
    """
    docgraph: type reference resolution for documentation projects

    Global flags apply to all commands.
    Machine mode is DEFAULT (pure data, no formatting).
    Use --human/-H for pretty output.
    """
    level = "DEBUG" if verbose else "INFO"
    if human:
        CLIConfig.set_machine_mode(False)
        setup_logging(level=level, force=True)
    else:
        CLIConfig.set_machine_mode(None)
        # Machine mode is default - suppress console logging
        setup_logging(level=level, suppress_console=CLIConfig.is_machine_mode(), force=True)


app.command(name="resolve")(resolve.resolve_cmd)
app.command(name="hierarchy")(resolve.hierarchy_cmd)
app.command(name="dangling")(resolve.dangling_cmd)


@app.command()
def version():
    """
    Print the installed docgraph version.
    """
    logger.debug(f"docgraph {__version__}")
    typer.echo(__version__)


if __name__ == "__main__":
    app()
