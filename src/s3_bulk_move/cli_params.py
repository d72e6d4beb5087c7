"""Shared CLI parameter definitions.

The functions here return the typer.Option objects used in command
signatures, so names and help text live in one place:

    @app.command()
    def my_command(
        src_region: Annotated[Optional[str], src_region_option()] = None,
    ):
        pass

Parameter Categories:
    - Selection parameters: filter pattern and rename template
    - AWS parameters: regions, endpoint and profile
    - Listing parameters: page size
"""

from typing import Annotated, Optional

import typer


def src_filter_option() -> Annotated[Optional[str], typer.Option]:
    """Source filter option."""
    return typer.Option(
        "--src-filter",
        help="Regex matched against src key parts trailing <src-url>.",
    )


def dest_replace_option() -> Annotated[Optional[str], typer.Option]:
    """Destination replacement option."""
    return typer.Option(
        "--dest-replace",
        help=(
            "Replacement pattern for the trailing key part. May refer to groups "
            "from --src-filter as $1, $name or ${name}."
        ),
    )


def src_region_option() -> Annotated[Optional[str], typer.Option]:
    """Source region option."""
    return typer.Option(
        "--src-region",
        help="AWS region of src bucket. Defaults to $AWS_DEFAULT_REGION.",
    )


def dest_region_option() -> Annotated[Optional[str], typer.Option]:
    """Destination region option."""
    return typer.Option(
        "--dest-region",
        help="AWS region of dest bucket. Defaults to $AWS_DEFAULT_REGION.",
    )


def aws_endpoint_url_option() -> Annotated[Optional[str], typer.Option]:
    """AWS endpoint URL option."""
    return typer.Option(
        "--endpoint-url",
        help="Custom S3 endpoint URL. Region names are not checked when set.",
    )


def aws_profile_option() -> Annotated[Optional[str], typer.Option]:
    """AWS profile option."""
    return typer.Option("--aws-profile", help="AWS CLI profile name")


def page_size_option() -> Annotated[Optional[int], typer.Option]:
    """Listing page size option."""
    return typer.Option(
        "--page-size", min=1, help="Objects requested per listing call"
    )
