"""HTML rendering for the server-side pages.

Pages are plain f-string templates, like the API landing page. Every value
that came from a user or the database goes through esc().
"""

from html import escape

from poms.application.services.auth_guard import GuardOutcome
from poms.domain.enums import Role
from poms.domain.session import SessionIdentity

_STYLE = """
    * { box-sizing: border-box; }
    body {
        font-family: system-ui, sans-serif;
        margin: 0;
        min-height: 100vh;
        background: #f7f7f8;
        color: #1f1f1f;
    }
    header {
        display: flex;
        justify-content: space-between;
        align-items: center;
        padding: 0.75rem 1.5rem;
        background: #fff;
        border-bottom: 1px solid #e4e4e7;
    }
    header nav a { margin-right: 1rem; color: #1f1f1f; text-decoration: none; }
    header .brand { font-weight: 600; color: #ed5d43; }
    main { max-width: 960px; margin: 0 auto; padding: 2rem 1.5rem; }
    h1 { font-size: 1.5rem; margin: 0 0 1rem 0; }
    table { width: 100%; border-collapse: collapse; background: #fff; }
    th, td { text-align: left; padding: 0.5rem 0.75rem; border-bottom: 1px solid #eee; }
    form.card { background: #fff; padding: 1.5rem; max-width: 420px; border: 1px solid #e4e4e7; }
    form.card label { display: block; margin: 0.75rem 0 0.25rem; font-size: 0.875rem; }
    form.card input, form.card select { width: 100%; padding: 0.5rem; }
    form.card button { margin-top: 1rem; padding: 0.5rem 1rem; }
    .error { color: #b42318; margin: 0.5rem 0; }
    .muted { color: #71717a; }
    .center {
        display: flex;
        flex-direction: column;
        align-items: center;
        justify-content: center;
        height: 100vh;
        gap: 1rem;
    }
    .spinner {
        width: 40px;
        height: 40px;
        border: 4px solid #eee;
        border-top-color: #ed5d43;
        border-radius: 50%;
        animation: spin 0.8s linear infinite;
    }
    @keyframes spin { to { transform: rotate(360deg); } }
"""

_ADMIN_NAV = (("/admin", "Dashboard"), ("/user-management", "User management"))
_FRONTEND_NAV = (
    ("/dashboard", "Dashboard"),
    ("/companies", "Companies"),
    ("/orders", "Orders"),
    ("/profile", "Profile"),
    ("/settings", "Settings"),
)


def esc(value: object) -> str:
    """Escape a value for HTML text or attribute context; None renders as ''."""
    return "" if value is None else escape(str(value), quote=True)


def _nav(session: SessionIdentity | None, admin: bool) -> str:
    if session is None:
        return ""
    links = _ADMIN_NAV if admin else _FRONTEND_NAV
    if admin is False and session.role is Role.SUPER_ADMIN:
        links = links + (("/admin", "Admin"),)
    items = "".join(f'<a href="{href}">{esc(label)}</a>' for href, label in links)
    who = esc(session.name or session.email or session.user_id)
    return f"""
<header>
    <nav><span class="brand">POMS</span> {items}</nav>
    <div><span class="muted">{who} ({esc(session.role.value)})</span> <a href="/logout">Sign out</a></div>
</header>"""


def render_document(title: str, body: str, head_extra: str = "") -> str:
    """Wrap body in the shared HTML document."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{esc(title)} | POMS</title>
    {head_extra}
    <style>{_STYLE}</style>
</head>
<body>
{body}
</body>
</html>
"""


def render_page(
    title: str,
    content: str,
    session: SessionIdentity | None,
    *,
    admin: bool = False,
) -> str:
    """Render a signed-in page: header navigation plus content (already escaped)."""
    body = f"""{_nav(session, admin)}
<main>
    <h1>{esc(title)}</h1>
    {content}
</main>"""
    return render_document(title, body)


def render_guard_page(outcome: GuardOutcome) -> str:
    """Neutral spinner shown instead of a page the guard did not let through.

    When the outcome carries a redirect target the page refreshes to it.
    """
    head_extra = ""
    if outcome.redirect_to:
        head_extra = f'<meta http-equiv="refresh" content="0;url={esc(outcome.redirect_to)}">'
    body = f"""
<div class="center">
    <div class="spinner"></div>
    <p class="muted">{esc(outcome.message)}</p>
</div>"""
    return render_document(outcome.message or "Loading", body, head_extra)


def render_table(headers: list[str], rows: list[list[str]], empty: str) -> str:
    """Render a table; cells must already be escaped (they may contain links)."""
    if not rows:
        return f'<p class="muted">{esc(empty)}</p>'
    head = "".join(f"<th>{esc(h)}</th>" for h in headers)
    body = "".join("<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>" for row in rows)
    return f"<table><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"


def render_error(message: str | None) -> str:
    return f'<p class="error">{esc(message)}</p>' if message else ""


def render_login_page(error: str | None = None, email: str = "") -> str:
    body = f"""
<div class="center">
    <form class="card" method="post" action="/login">
        <h1>Sign in</h1>
        {render_error(error)}
        <label for="email">Email</label>
        <input id="email" name="email" type="email" value="{esc(email)}" required>
        <label for="password">Password</label>
        <input id="password" name="password" type="password" required>
        <button type="submit">Sign in</button>
    </form>
</div>"""
    return render_document("Sign in", body)


def render_not_found_page(session: SessionIdentity | None, what: str = "Page") -> str:
    return render_page(f"{what} not found", '<p><a href="/companies">Back</a></p>', session)
