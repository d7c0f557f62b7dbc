"""unity-indexer command."""

from pathlib import Path

import click

from unity_indexer import __version__
from unity_indexer.config import load_config
from unity_indexer.core.errors import UnityIndexerError
from unity_indexer.core.formatting import format_path_list, pluralize
from unity_indexer.core.logging import clear_run_id, configure_logging, set_run_id
from unity_indexer.core.progress import spinner, status, task
from unity_indexer.index import ProjectScanner
from unity_indexer.render import render_json, render_markdown, write_document


@click.command()
@click.version_option(version=__version__, prog_name="unity-indexer")
@click.argument("project", type=click.Path(exists=True, file_okay=False, path_type=Path))
@click.argument("output", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--json",
    "json_output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the records as JSON to this path",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file (default: PROJECT/.unity-indexer.yaml if present)",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(
    project: Path,
    output: Path | None,
    json_output: Path | None,
    config_path: Path | None,
    verbose: bool,
) -> None:
    """Index the functions of a Unity project into a Markdown document.

    PROJECT is the Unity project root (the directory holding Assets/).
    OUTPUT defaults to unity-functions-index.md in the current directory.
    """
    configure_logging(level="DEBUG" if verbose else "WARNING")
    set_run_id()
    project = project.resolve()

    try:
        config = load_config(project, config_path)
        logging_config = config.logging
        if verbose:
            logging_config = logging_config.model_copy(update={"level": "DEBUG"})
        configure_logging(config=logging_config)

        indexer_config = config.indexer
        output = output or Path(indexer_config.output_file)

        status(f"Project: {project}", style="none")
        with task(f"Scanning {indexer_config.source_dir}"):
            result = ProjectScanner(indexer_config).scan(project)

        if result.failures:
            skipped = [Path(f.path).relative_to(project).as_posix() for f in result.failures]
            status(
                f"Skipped {pluralize(len(skipped), 'unreadable file')}: "
                f"{format_path_list(skipped)}",
                style="warning",
            )
        status(
            f"Found {pluralize(len(result.records), 'function')} "
            f"in {pluralize(result.files_parsed, 'file')} "
            f"({result.lifecycle_count} lifecycle, {result.coroutine_count} coroutines)",
            style="success",
        )

        with spinner("Rendering index"):
            document = render_markdown(result.records, indexer_config)
        write_document(output, document)
        status(f"Index written to {output}", style="success")

        if json_output is not None:
            write_document(json_output, render_json(result.records))
            status(f"JSON written to {json_output}", style="success")
    except UnityIndexerError as e:
        raise click.ClickException(str(e)) from e
    finally:
        clear_run_id()


if __name__ == "__main__":
    cli()
