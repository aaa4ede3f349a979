"""WRAPTEST commands: rewrite and check modules.

Behavior
- ``wraptest rewrite`` prints the rewritten module on **stdout** (or writes it
  to ``--output``) so it can feed a build step; human-oriented notices go to
  **stderr**.
- ``wraptest check`` validates annotated modules without writing anything and
  reports every offending test of every module before exiting.

Configuration
- The wrap arguments come from ``--wrapper``/``--async-wrapper`` or, when
  neither is given, from the module's ``# wraptest: ...`` directive.
- Recognized test markers are the defaults plus ``WRAPTEST_MARKERS`` plus any
  ``--marker`` options.

Failure modes
- Any module that cannot be rewritten → exit code 1
  with one line per problem.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from wraptest.domain.arguments import is_dotted_identifier
from wraptest.domain.errors import TargetErrorGroup, WrapTestError
from wraptest.domain.model import WrapConfig
from wraptest.service_layer.directive import transform_annotated
from wraptest.service_layer.transform import transform

from .helpers import error, parse_markers, success, warn

logger = logging.getLogger(__name__)

NO_DIRECTIVE_MSG = (
    "{path} has no wraptest directive.\n\n"
    "Add one at the top of the module, e.g.:\n"
    "  # wraptest: wrapper = with_setup, async_wrapper = with_setup_async\n"
    "or pass --wrapper/--async-wrapper."
)

MARKER_HELP = (
    "Extra decorator path recognized as a test marker (e.g. pytest.mark.unit). "
    "Repeatable; adds to the defaults and to WRAPTEST_MARKERS."
)


def _check_identifier(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: str | None,
) -> str | None:
    if value is not None and not is_dotted_identifier(value):
        raise click.BadParameter(f"{value!r} is not an identifier")
    return value


def _report(path: Path, group: TargetErrorGroup) -> None:
    count = len(group.errors)
    error(f"{path}: {count} test{'s' if count != 1 else ''} cannot be wrapped")
    for target_error in group.errors:
        click.echo(f"  - {target_error}", err=True)


@click.command()
@click.argument(
    "source", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--wrapper",
    metavar="NAME",
    callback=_check_identifier,
    help="Function that runs each synchronous test.",
)
@click.option(
    "--async-wrapper",
    "async_wrapper",
    metavar="NAME",
    callback=_check_identifier,
    help="Coroutine function that runs each async test.",
)
@click.option(
    "--marker",
    "-m",
    "markers",
    multiple=True,
    callback=parse_markers,
    help=MARKER_HELP,
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the rewritten module to this file instead of stdout.",
)
@click.pass_context
def rewrite(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    source: Path,
    wrapper: str | None,
    async_wrapper: str | None,
    markers: frozenset[str],
    output: Path | None,
) -> None:
    """Rewrite SOURCE so every test runs inside its wrapper."""
    text = source.read_text(encoding="utf-8")
    logger.info("Rewriting %s", source)
    try:
        if wrapper or async_wrapper:
            config = WrapConfig(wrapper=wrapper, async_wrapper=async_wrapper)
            result = transform(text, config, markers=markers)
        else:
            result = transform_annotated(text, markers=markers)
    except TargetErrorGroup as e:
        _report(source, e)
        ctx.exit(1)
    except WrapTestError as e:
        raise click.ClickException(f"{source}: {e}") from e

    if result is None:
        raise click.ClickException(NO_DIRECTIVE_MSG.format(path=source))

    if output is None:
        click.echo(result, nl=False)
    else:
        output.write_text(result, encoding="utf-8")
        success(f"Wrote {output}")


@click.command()
@click.argument(
    "sources",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--marker",
    "-m",
    "markers",
    multiple=True,
    callback=parse_markers,
    help=MARKER_HELP,
)
@click.pass_context
def check(ctx: click.Context, sources: tuple[Path, ...], markers: frozenset[str]) -> None:
    """Check that every test in the annotated SOURCES can be wrapped."""
    failed = 0
    for source in sources:
        logger.info("Checking %s", source)
        try:
            result = transform_annotated(
                source.read_text(encoding="utf-8"), markers=markers
            )
        except TargetErrorGroup as e:
            failed += 1
            _report(source, e)
            continue
        except WrapTestError as e:
            failed += 1
            error(f"{source}: {e}")
            continue

        if result is None:
            warn(f"{source} has no wraptest directive.")
        else:
            success(f"{source}: OK")

    if failed:
        logger.warning("%d of %d module(s) failed the check", failed, len(sources))
        ctx.exit(1)
