from html import escape
from typing import Iterable, List

from .schemas import GitHubPanel, LoadState, PortfolioContent, RepositoryRecord

PANEL_POLL_MS = 1500

STYLE = """
<style>
  body { margin: 0; font-family: system-ui, sans-serif; background: linear-gradient(135deg, #475569, #1d4ed8, #3730a3); }
  .wrap { max-width: 72rem; margin: 0 auto; padding: 2rem 1rem; }
  header { text-align: center; color: #fff; padding: 2rem; border-radius: 1.5rem; background: rgba(255,255,255,.2); margin-bottom: 2rem; }
  header h1 { font-size: 3.5rem; margin: 0 0 1rem; }
  section { background: rgba(255,255,255,.95); border-radius: 1.5rem; padding: 2rem; margin-bottom: 2rem; }
  section h2 { color: #4f46e5; margin-top: 0; }
  .grid { display: grid; gap: 1.5rem; grid-template-columns: repeat(auto-fit, minmax(16rem, 1fr)); }
  .card { background: #f3f4f6; border-left: 4px solid #6366f1; border-radius: 1rem; padding: 1.5rem; }
  .card.upcoming { border-color: #eab308; opacity: .7; }
  .pill { display: inline-block; background: #4f46e5; color: #fff; border-radius: 999px; padding: .2rem .75rem; margin: 0 .4rem .4rem 0; font-size: .85rem; }
  .stat { background: linear-gradient(135deg, #334155, #1d4ed8); color: #fff; border-radius: 1rem; padding: 1.5rem; text-align: center; }
  .stat .value { font-size: 2rem; font-weight: 700; }
  .muted { color: #4b5563; }
  .links a { color: #fff; margin: 0 .5rem; }
</style>
"""

PANEL_SCRIPT = """
<script>
  (function poll() {
    var panel = document.getElementById("github-panel");
    if (!panel || panel.dataset.state !== "loading") return;
    setTimeout(function () {
      fetch("/api/github/panel")
        .then(function (resp) { return resp.text(); })
        .then(function (html) { panel.outerHTML = html; poll(); })
        .catch(function () { poll(); });
    }, %d);
  })();
</script>
""" % PANEL_POLL_MS


def _pills(items: Iterable[str]) -> str:
    return "".join(f'<span class="pill">{escape(item)}</span>' for item in items)


def _bullets(items: Iterable[str]) -> str:
    rows = "".join(f"<li>{escape(item)}</li>" for item in items)
    return f"<ul>{rows}</ul>" if rows else ""


def render_repository_card(repo: RepositoryRecord) -> str:
    tags: List[str] = [repo.language] if repo.language else []
    tags.extend(repo.topics)
    homepage = (
        f' &middot; <a href="{escape(repo.homepage)}" target="_blank" rel="noopener noreferrer">Live</a>'
        if repo.homepage
        else ""
    )
    return (
        '<div class="card">'
        f'<h3><a href="{escape(repo.html_url)}" target="_blank" rel="noopener noreferrer">'
        f"{escape(repo.name)}</a></h3>"
        f'<p class="muted">{escape(repo.description or "")}</p>'
        f"<div>{_pills(tags)}</div>"
        f'<p class="muted">&#9733; {repo.stargazers_count} &middot; forks {repo.forks_count}'
        f" &middot; updated {repo.updated_at.date().isoformat()}{homepage}</p>"
        "</div>"
    )


def render_github_panel(panel: GitHubPanel) -> str:
    """HTML fragment for the GitHub section, one branch per load state."""
    state = panel.state.value
    if panel.state is LoadState.LOADING:
        body = '<p class="muted">Loading GitHub data...</p>'
    elif panel.state is LoadState.FAILED:
        body = (
            '<p class="muted">GitHub data is unavailable right now. '
            f'See <a href="https://github.com/{escape(panel.username)}">the profile on GitHub</a>.</p>'
        )
    else:
        body = ""
        if panel.summary:
            stats = [
                (panel.summary.total_repos, "Public Repositories"),
                (panel.summary.total_stars, "Total Stars"),
                (panel.summary.total_forks, "Total Forks"),
                (panel.summary.top_language, "Top Language"),
            ]
            body += '<div class="grid">' + "".join(
                f'<div class="stat"><div class="value">{escape(str(value))}</div>'
                f"<div>{label}</div></div>"
                for value, label in stats
            ) + "</div>"
        if panel.featured:
            body += '<div class="grid" style="margin-top:2rem">'
            body += "".join(render_repository_card(repo) for repo in panel.featured)
            body += "</div>"
        else:
            body += '<p class="muted">No public projects to feature yet.</p>'
    return f'<div id="github-panel" data-state="{state}">{body}</div>'


def _section(title: str, inner: str) -> str:
    return f"<section><h2>{escape(title)}</h2>{inner}</section>"


def render_page(content: PortfolioContent, panel: GitHubPanel) -> str:
    links = "".join(
        f'<a href="{escape(link.url)}" target="_blank" rel="noopener noreferrer">{escape(link.label)}</a>'
        for link in content.contact_links
    )
    header = (
        "<header>"
        f"<h1>{escape(content.name)}</h1>"
        f"<p>{escape(content.degree)}</p>"
        f'<p class="links">{links}</p>'
        "<p><strong>Professional Interests</strong></p>"
        f"<div>{_pills(content.professional_interests)}</div>"
        "</header>"
    )

    awards = '<div class="grid">' + "".join(
        f'<div class="card"><h3>{escape(a.title)}</h3><p>{escape(a.description)}</p></div>'
        for a in content.awards
    ) + "</div>"

    skills = '<div class="grid">' + "".join(
        f'<div class="card"><h3>{escape(c.title)}</h3>{_pills(c.skills)}</div>'
        for c in content.skill_categories
    ) + "</div>"

    experience = "".join(
        f'<div class="card"><h3>{escape(e.company)}</h3><h4>{escape(e.role)}</h4>'
        f'<p class="muted"><em>{escape(e.period)}</em></p>{_bullets(e.achievements)}</div>'
        for e in content.experiences
    )

    projects = '<div class="grid">' + "".join(
        f'<div class="card"><h3>{escape(p.title)}</h3><p class="muted">{escape(p.description)}</p>'
        f"<div>{_pills(p.tech)}</div><p><strong>Results:</strong> {escape(p.results)}</p></div>"
        for p in content.featured_projects
    ) + "</div>"

    leadership = ""
    for item in content.leadership:
        badge = ' <span class="pill">To Be Added</span>' if item.upcoming else ""
        role = f"<h4>{escape(item.role)}</h4>" if item.role else ""
        period = f'<p class="muted"><em>{escape(item.period)}</em></p>' if item.period else ""
        summary = f'<p class="muted"><em>{escape(item.summary)}</em></p>' if item.summary else ""
        css = "card upcoming" if item.upcoming else "card"
        leadership += (
            f'<div class="{css}"><h3>{escape(item.organization)}{badge}</h3>'
            f"{role}{period}{summary}{_bullets(item.achievements)}</div>"
        )

    interests = '<div class="grid">'
    for interest in content.interests:
        links = "".join(
            f'<p><a href="{escape(link.url)}" target="_blank" rel="noopener noreferrer">{escape(link.label)}</a></p>'
            for link in interest.links
        )
        interests += (
            f'<div class="card"><h3>{escape(interest.title)}</h3>'
            f'<p><span class="pill">{escape(interest.badge)}</span> {escape(interest.headline)}</p>'
            f'<p class="muted">{escape(interest.description)}</p>'
            f"<div>{_pills(interest.traits)}</div>{links}</div>"
        )
    interests += "</div>"
    interests += (
        '<div class="card" style="margin-top:1.5rem"><h3>How These Passions Shape My Work</h3>'
        f"<p>{escape(content.interests_reflection)}</p></div>"
    )

    sections = "".join(
        [
            _section("Awards & Recognition", awards),
            _section("Technical Skills", skills),
            _section("Professional Experience", experience),
            _section("GitHub Projects", render_github_panel(panel)),
            _section("Featured Projects", projects),
            _section("Leadership & Community Involvement", leadership),
            _section("Beyond Work", interests),
        ]
    )
    return (
        "<!DOCTYPE html>"
        '<html lang="en"><head><meta charset="utf-8">'
        '<meta name="viewport" content="width=device-width, initial-scale=1">'
        f"<title>{escape(content.name)} | Portfolio</title>{STYLE}</head>"
        f'<body><div class="wrap">{header}{sections}</div>{PANEL_SCRIPT}</body></html>'
    )
