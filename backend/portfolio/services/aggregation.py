from typing import Dict, Optional, Sequence, Tuple

from ..schemas import ProfileMetadata, ProfileSummary, RepositoryRecord

DEFAULT_TOP_LANGUAGE = "JavaScript"
FEATURED_LIMIT = 6


def total_stars(repos: Sequence[RepositoryRecord]) -> int:
    return sum(repo.stargazers_count for repo in repos)


def total_forks(repos: Sequence[RepositoryRecord]) -> int:
    return sum(repo.forks_count for repo in repos)


def top_language(repos: Sequence[RepositoryRecord], default: str = DEFAULT_TOP_LANGUAGE) -> str:
    """Most frequent primary language on the page.

    Scans in fetch order keeping a running best that only moves on a strictly
    greater count, so a tie goes to the language that reached it first.
    """
    counts: Dict[str, int] = {}
    best: Optional[str] = None
    best_count = 0
    for repo in repos:
        if not repo.language:
            continue
        counts[repo.language] = counts.get(repo.language, 0) + 1
        if counts[repo.language] > best_count:
            best, best_count = repo.language, counts[repo.language]
    return best if best is not None else default


def is_featurable(repo: RepositoryRecord) -> bool:
    return not repo.fork and bool(repo.description)


def select_featured(
    repos: Sequence[RepositoryRecord], limit: int = FEATURED_LIMIT
) -> Tuple[RepositoryRecord, ...]:
    featured = [repo for repo in repos if is_featurable(repo)]
    return tuple(featured[:limit])


def summarize(
    profile: ProfileMetadata, repos: Sequence[RepositoryRecord]
) -> Tuple[ProfileSummary, Tuple[RepositoryRecord, ...]]:
    # public_repos is the account total and may exceed the fetched page
    summary = ProfileSummary(
        total_repos=profile.public_repos,
        total_stars=total_stars(repos),
        total_forks=total_forks(repos),
        top_language=top_language(repos),
    )
    return summary, select_featured(repos)
