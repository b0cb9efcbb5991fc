from github_cherry_pick.core.publisher import cherry_pick_commits

__all__ = ["cherry_pick_commits"]
