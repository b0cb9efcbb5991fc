import dataclasses
import logging

import click

from github_cherry_pick.config import load_config
from github_cherry_pick.core.context import CherryPickContext, create_context
from github_cherry_pick.core.publisher import cherry_pick_commits
from github_cherry_pick.errors import CherryPickError
from github_cherry_pick.events import CherryPickEvent, EventSink
from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.dry_run import DryRunGitData
from github_cherry_pick.gitdata.printing import PrintingGitData
from github_cherry_pick.gitdata.types import RepoId
from github_cherry_pick.output import machine_output, user_output

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


def _configure_debug_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


def _format_event(event: CherryPickEvent) -> str | None:
    """Render a progress event for --verbose output (None to skip it)."""
    fields = event.fields
    if event.name == "initial_head":
        return f"{fields['head']} is at {fields['sha']}"
    if event.name == "commit.started":
        return click.style(f"Cherry-picking {fields['commit']} ({fields['position']})", bold=True)
    if event.name == "commit.created":
        return f"  → {fields['sha']}"
    return None


def _make_sink(*, verbose: bool) -> EventSink:
    def sink(event: CherryPickEvent) -> None:
        if event.name == "sandbox.cleanup_failed":
            user_output(
                click.style(
                    f"⚠ Could not delete temporary ref {event.fields['ref']}: "
                    f"{event.fields['error']}",
                    fg="yellow",
                )
            )
            return
        if not verbose:
            return
        message = _format_event(event)
        if message is not None:
            user_output(message)

    return sink


@click.command("github-cherry-pick", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="github-cherry-pick")
@click.argument("repo", metavar="OWNER/REPO")
@click.argument("head")
@click.argument("commits", nargs=-1, required=True)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Validate the commits without writing anything to the repository.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Show each API call and commit as it is created.",
)
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.option("--hostname", default=None, help="GitHub host (for GitHub Enterprise).")
@click.pass_context
def cli(
    ctx: click.Context,
    repo: str,
    head: str,
    commits: tuple[str, ...],
    dry_run: bool,
    verbose: bool,
    debug: bool,
    hostname: str | None,
) -> None:
    """Cherry-pick COMMITS onto the HEAD branch of OWNER/REPO.

    Commits are applied in the order given, on GitHub, without a local clone.
    The branch is only updated once all commits were applied, and only if
    nobody pushed to it in the meantime: either every commit lands or none
    does.

    Prints the new sha of HEAD on stdout.

    Example:
        github-cherry-pick octocat/hello-world release-1.x 1a2b3c4 5d6e7f8
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            config = load_config()
        except ValueError as e:
            user_output(click.style(f"Error: {e}", fg="red"))
            raise SystemExit(1) from None
        if hostname is not None:
            config = dataclasses.replace(config, hostname=hostname)
        ctx.obj = create_context(config)

    app: CherryPickContext = ctx.obj
    if debug or app.config.debug:
        _configure_debug_logging()

    logger.debug(
        "Command invoked: cherry_pick(repo=%s, head=%s, commits=%s, dry_run=%s)",
        repo,
        head,
        commits,
        dry_run,
    )

    try:
        repo_id = RepoId.parse(repo)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="OWNER/REPO") from None

    # First: Choose inner implementation based on dry-run mode
    git_data: GitData = DryRunGitData(app.git_data) if dry_run else app.git_data
    # Then: wrap with Printing layer when asked to show API calls
    if verbose:
        git_data = PrintingGitData(git_data, dry_run=dry_run)

    try:
        new_sha = cherry_pick_commits(
            git_data,
            repo_id,
            commits=list(commits),
            head=head,
            on_event=_make_sink(verbose=verbose),
        )
    except CherryPickError as e:
        logger.debug("Exception caught: %s: %s", type(e).__name__, str(e))
        logger.debug("Exception details:", exc_info=True)
        user_output(click.style(f"❌ Cherry-pick failed: {e}", fg="red"))
        for note in getattr(e, "__notes__", []):
            user_output(click.style(f"   {note}", fg="red"))
        raise SystemExit(1) from None

    if dry_run:
        user_output(
            click.style(
                f"✓ Dry run: {len(commits)} commit(s) would be cherry-picked onto {head}",
                fg="green",
            )
        )
        return

    user_output(click.style(f"✓ Cherry-picked {len(commits)} commit(s) onto {head}", fg="green"))
    machine_output(new_sha)


def main() -> None:
    """CLI entry point used by the `github-cherry-pick` console script."""
    cli()
