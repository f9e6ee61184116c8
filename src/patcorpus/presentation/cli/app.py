"""patcorpus CLI application using Typer.

Commands:
- ``parse``: normalize classification codes and show their hierarchy
- ``build``: filter USPTO bulk files into a partitioned corpus
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from patcorpus.application import CorpusBuilder
from patcorpus.domain.classification import (
    ClassificationParseError,
    ClassificationType,
    PatentClassification,
    create_classification,
    try_create_classification,
)
from patcorpus.infrastructure import PartitionFileWriter
from patcorpus.matching import (
    MatchClassificationContained,
    MatchClassificationXPath,
    PredicateCompilationError,
)
from patcorpus.presentation.cli.logging_config import configure_logging
from patcorpus_config import get_settings

app = typer.Typer(
    name="patcorpus",
    help="patcorpus - build patent corpora by classification",
    no_args_is_help=True,
)
console = Console()

CodesOption = Annotated[
    list[str] | None,
    typer.Option(help="Wanted code (repeatable)", show_default=False),
]


@app.callback()
def main(
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", help="Override PATCORPUS_LOG_LEVEL"),
    ] = None,
) -> None:
    """Build patent corpora from bulk XML by classification."""
    configure_logging(log_level or get_settings().log_level)


@app.command("parse")
def parse_codes(
    codes: Annotated[list[str], typer.Argument(help="Classification codes")],
    classification_type: Annotated[
        ClassificationType,
        typer.Option("--type", "-t", case_sensitive=False, help="Taxonomy"),
    ] = ClassificationType.CPC,
) -> None:
    """Normalize classification codes and show their hierarchy."""
    table = Table(title=f"{classification_type.label} classifications")
    table.add_column("Original")
    table.add_column("Normalized", style="cyan")
    table.add_column("Parts")
    table.add_column("Depth", justify="right")
    table.add_column("Status")

    failed = 0
    for code in codes:
        classification = try_create_classification(code, classification_type)
        if classification.parse_failed:
            failed += 1
            status = "[red]parse failed[/red]"
        else:
            status = "[green]ok[/green]"
        table.add_row(
            code,
            classification.get_text_normalized(),
            " / ".join(classification.get_parts()),
            str(classification.get_depth()),
            status,
        )

    console.print(table)
    if failed:
        raise typer.Exit(code=1)


def _wanted_classifications(
    cpc: list[str], uspc: list[str], locarno: list[str]
) -> list[PatentClassification]:
    wanted: list[PatentClassification] = []
    for codes, classification_type in (
        (cpc, ClassificationType.CPC),
        (uspc, ClassificationType.USPC),
        (locarno, ClassificationType.LOCARNO),
    ):
        for code in codes:
            wanted.append(
                create_classification(
                    code, classification_type, is_inventive_or_main=True
                )
            )
    return wanted


@app.command("build")
def build_corpus(  # NOQA: PLR0913
    inputs: Annotated[
        list[Path],
        typer.Argument(exists=True, dir_okay=False, help="Bulk .xml or .zip files"),
    ],
    cpc: CodesOption = None,
    uspc: CodesOption = None,
    locarno: CodesOption = None,
    out: Annotated[Path | None, typer.Option(help="Output directory")] = None,
    name: Annotated[str | None, typer.Option(help="Output file name")] = None,
    record_limit: Annotated[
        int | None, typer.Option(min=0, help="Documents per file (0 = no limit)")
    ] = None,
    size_limit_mb: Annotated[
        int | None, typer.Option(min=0, help="MB per file (0 = no limit)")
    ] = None,
    contained: Annotated[
        bool,
        typer.Option(help="Match by classification containment instead of XPath"),
    ] = False,
) -> None:
    """Filter bulk files into a corpus of documents with wanted classifications."""
    settings = get_settings()

    try:
        wanted = _wanted_classifications(cpc or [], uspc or [], locarno or [])
    except ClassificationParseError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1) from e
    if not wanted:
        console.print("[red]✗[/red] Give at least one --cpc, --uspc or --locarno")
        raise typer.Exit(code=1)

    matcher = (
        MatchClassificationContained(wanted)
        if contained
        else MatchClassificationXPath(wanted)
    )
    try:
        matcher.setup()
    except PredicateCompilationError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1) from e

    writer = PartitionFileWriter.with_limits(
        out or settings.output_dir,
        name or settings.output_file_name,
        settings.output_file_suffix,
        record_limit=(
            settings.partition_record_limit if record_limit is None else record_limit
        ),
        size_limit_mb=(
            settings.partition_size_limit_mb if size_limit_mb is None else size_limit_mb
        ),
        encoding=settings.output_encoding,
    )
    with writer:
        stats = CorpusBuilder(matcher, writer).build(inputs)

    console.print(
        f"\n[bold green]Corpus built[/bold green]: {stats.matched} of "
        f"{stats.total} documents matched ({stats.skipped} skipped)"
    )
    if stats.by_pattern:
        table = Table(title="Matches by pattern")
        table.add_column("Pattern", overflow="fold")
        table.add_column("Documents", justify="right")
        for pattern, count in stats.by_pattern.most_common():
            table.add_row(pattern, str(count))
        console.print(table)
    for path in writer.files_written:
        console.print(f"[dim]wrote {path}[/dim]")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
