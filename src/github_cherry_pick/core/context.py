"""Application context with dependency injection."""

from dataclasses import dataclass

from github_cherry_pick.config import CherryPickConfig, load_config
from github_cherry_pick.gitdata.abc import GitData
from github_cherry_pick.gitdata.fake import FakeGitData
from github_cherry_pick.gitdata.real import RealGitData


@dataclass(frozen=True)
class CherryPickContext:
    """Immutable context holding all dependencies for cherry-pick operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git_data: GitData
    config: CherryPickConfig

    @staticmethod
    def for_test(
        git_data: GitData | None = None,
        config: CherryPickConfig | None = None,
    ) -> "CherryPickContext":
        """Create test context with optional pre-configured dependencies.

        Args:
            git_data: Optional GitData implementation. If None, creates empty FakeGitData.
            config: Optional configuration. If None, uses defaults.

        Returns:
            CherryPickContext configured with provided values and test defaults
        """
        return CherryPickContext(
            git_data=git_data if git_data is not None else FakeGitData(),
            config=config if config is not None else CherryPickConfig(),
        )


def create_context(config: CherryPickConfig | None = None) -> CherryPickContext:
    """Create production context with real implementations.

    Called at CLI entry point. Commands wrap git_data with DryRunGitData or
    PrintingGitData according to their flags.

    Args:
        config: Optional configuration. If None, loads it from file and environment.

    Returns:
        CherryPickContext with real implementations
    """
    if config is None:
        config = load_config()

    return CherryPickContext(
        git_data=RealGitData(hostname=config.hostname, timeout=config.timeout),
        config=config,
    )
