"""CLI interface for the pipeline dashboard."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from src.pipedash.config import config
from src.pipedash.dashboard import (
    DashboardConfig,
    ExecutionStatus,
    Pipeline,
    PipelineDashboard,
    Stage,
)
from src.pipedash.errors import PipedashError
from src.pipedash.sources import (
    CodePipelineSource,
    PipelineStateSource,
    SnapshotFileSource,
    select_pipeline,
)

console = Console()
logger = logging.getLogger(__name__)

# Dependencies whose records are kept out of the tool's log output
QUIET_LOGGERS = ("boto3", "botocore", "urllib3")

DEMO_PIPELINE = Pipeline(
    name="demo-pipeline",
    stages=[
        Stage("Source", ExecutionStatus("Succeeded", "demo-1")),
        Stage("Build", ExecutionStatus("InProgress", "demo-1")),
        Stage("Test", ExecutionStatus("Failed", "demo-0")),
        Stage("Approve", ExecutionStatus("Stopped", "demo-0")),
        Stage("Deploy", None),
    ]
)


def setup_logging(level: str) -> None:
    """Send log records to stderr through Rich so they stay out of the frame."""
    logging.root.handlers = []
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=True,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.root.addHandler(handler)
    numeric_level = logging.getLevelName(level.upper())
    logging.root.setLevel(numeric_level if isinstance(numeric_level, int) else logging.INFO)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def make_source(from_file: Optional[Path], profile: Optional[str], region: Optional[str]) -> PipelineStateSource:
    """Pick the snapshot source when a file is given, CodePipeline otherwise."""
    if from_file is not None:
        return SnapshotFileSource(from_file)
    return CodePipelineSource(profile=profile, region=region)


async def fetch_pipeline(
    source: PipelineStateSource,
    name: Optional[str],
    match: Optional[str]
) -> Pipeline:
    """
    Resolve the pipeline to show and fetch its state.

    Args:
        source: Pipeline-state source
        name: Exact pipeline name, skips listing when set
        match: Name fragment used to pick from the listing; without one the
            first listed pipeline is used
    """
    if not name:
        names = await source.list_pipelines()
        if match:
            name = select_pipeline(names, match)
        elif names:
            name = names[0]
        else:
            raise PipedashError("No pipelines!")
    return await source.get_pipeline(name)


@click.group()
def cli():
    """One-shot terminal dashboard for an AWS CodePipeline pipeline."""
    pass


@cli.command()
@click.option('--pipeline', 'pipeline_name', default=None, help='Exact pipeline name')
@click.option('--match', default=None, help='Show the first pipeline whose name contains this text')
@click.option('--profile', default=None, help='AWS credentials profile')
@click.option('--region', default=None, help='AWS region')
@click.option('--from-file', type=click.Path(exists=True, dir_okay=False, path_type=Path),
              default=None, help='Read a saved get-pipeline-state JSON document instead of calling AWS')
@click.option('--width', type=click.IntRange(min=1), default=None, help='Frame width (default: terminal width)')
@click.option('--height', type=click.IntRange(min=1), default=None, help='Frame height (default: terminal height)')
def show(pipeline_name, match, profile, region, from_file, width, height):
    """Fetch a pipeline's state and paint it once."""
    setup_logging(config.LOG_LEVEL)

    # A fragment on the command line overrides the configured pipeline name
    name = pipeline_name or (None if match else config.PIPELINE_NAME)
    if match is None and from_file is None:
        match = config.PIPELINE_MATCH

    try:
        config.validate(require_selection=from_file is None)
        source = make_source(from_file, profile, region)
        pipeline = asyncio.run(fetch_pipeline(source, name, match))

        dashboard = PipelineDashboard(DashboardConfig(width=width, height=height), console=console)
        dashboard.load(pipeline)
        dashboard.render_once()
    except (PipedashError, ValueError) as e:
        logger.error(str(e))
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()


@cli.command(name='list')
@click.option('--profile', default=None, help='AWS credentials profile')
@click.option('--region', default=None, help='AWS region')
def list_pipelines(profile, region):
    """List pipeline names."""
    setup_logging(config.LOG_LEVEL)

    try:
        names = asyncio.run(CodePipelineSource(profile=profile, region=region).list_pipelines())
    except PipedashError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise click.Abort()

    if not names:
        console.print("[yellow]No pipelines found[/yellow]")
        return

    table = Table(title="Pipelines")
    table.add_column("Name", style="cyan")
    for pipeline_name in names:
        table.add_row(pipeline_name)
    console.print(table)


@cli.command()
@click.option('--width', type=click.IntRange(min=1), default=None, help='Frame width (default: terminal width)')
@click.option('--height', type=click.IntRange(min=1), default=None, help='Frame height (default: terminal height)')
def demo(width, height):
    """Paint the dashboard with built-in sample stages."""
    setup_logging(config.LOG_LEVEL)

    dashboard = PipelineDashboard(DashboardConfig(width=width, height=height), console=console)
    dashboard.load(DEMO_PIPELINE)
    dashboard.render_once()


if __name__ == '__main__':
    cli()
