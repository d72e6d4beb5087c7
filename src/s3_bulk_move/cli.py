"""Command-line interface for s3-bulk-move.

Usage:
    s3-bulk-move [OPTIONS] SRC_URL DEST_URL

Lists the objects under SRC_URL, keeps those matching --src-filter (if given),
rewrites their keys with --dest-replace (if given) and prints one
``key<TAB>size`` line per selected object. Keys are printed relative to the
SRC_URL prefix.
"""

from typing import Annotated, Optional

import typer

from . import __version__
from .cli_params import (
    aws_endpoint_url_option,
    aws_profile_option,
    dest_region_option,
    dest_replace_option,
    page_size_option,
    src_filter_option,
    src_region_option,
)
from .core import Settings, get_logger
from .objectstorage import (
    S3ClientConfig,
    S3ClientManager,
    S3PageFetcher,
    parse_location,
    resolve_region,
)
from .output import RecordEmitter
from .selection import run_selection
from .transform import TransformRule

logger = get_logger(__name__)

app = typer.Typer(
    name="s3-bulk-move",
    help="Move S3 objects from src to dest.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"s3-bulk-move {__version__}")
        raise typer.Exit()


@app.command()
def move(
    src_url: Annotated[str, typer.Argument(help="Source, as s3://bucket/prefix")],
    dest_url: Annotated[str, typer.Argument(help="Destination, as s3://bucket/prefix")],
    src_filter: Annotated[Optional[str], src_filter_option()] = None,
    dest_replace: Annotated[Optional[str], dest_replace_option()] = None,
    src_region: Annotated[Optional[str], src_region_option()] = None,
    dest_region: Annotated[Optional[str], dest_region_option()] = None,
    endpoint_url: Annotated[Optional[str], aws_endpoint_url_option()] = None,
    aws_profile: Annotated[Optional[str], aws_profile_option()] = None,
    page_size: Annotated[Optional[int], page_size_option()] = None,
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version.",
        ),
    ] = None,
) -> None:
    """
    Move S3 objects from src to dest.

    Examples:
        s3-bulk-move s3://logs/2020/ s3://archive/
        s3-bulk-move s3://logs/ s3://archive/ --src-filter '\\.log$'
        s3-bulk-move s3://logs/ s3://archive/ --src-filter '(\\d+)/(.+)' \
            --dest-replace 'archive/$1/$2'
    """
    try:
        default_region = Settings().default_region

        source = parse_location(src_url)
        destination = parse_location(dest_url)

        validate_regions = endpoint_url is None
        source_config = S3ClientConfig(
            region_name=resolve_region(src_region, default_region, validate_regions),
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )
        dest_config = S3ClientConfig(
            region_name=resolve_region(dest_region, default_region, validate_regions),
            endpoint_url=endpoint_url,
            aws_profile=aws_profile,
        )

        rule = TransformRule.from_options(src_filter, dest_replace)

        logger.info(
            "Bulk move planned",
            source=source.url,
            source_region=source_config.region_name,
            destination=destination.url,
            destination_region=dest_config.region_name,
        )

        source_client = S3ClientManager(source_config).client
        run_selection(
            S3PageFetcher(source_client, page_size=page_size),
            source,
            rule,
            RecordEmitter(),
        )

    except Exception as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
