"""Shared page shell for the HTML pages."""

from html import escape

_STYLES = """
        * { box-sizing: border-box; }
        body {
            font-family: system-ui, -apple-system, 'Segoe UI', sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #f7f9fc;
            color: #1f2933;
            padding: 2rem 1rem;
        }
        .wrap { max-width: 640px; margin: 0 auto; }
        h1 { font-size: clamp(1.75rem, 5vw, 2.5rem); margin: 0 0 0.5rem 0; color: #0b3d91; }
        .lead { color: #52606d; font-size: 1.05rem; margin: 0 0 2rem 0; }
        .card {
            background: #fff;
            border: 1px solid #e4e7eb;
            border-radius: 8px;
            padding: 1.25rem 1.5rem;
            margin-bottom: 1.25rem;
        }
        .card h2 {
            font-size: 0.8rem;
            text-transform: uppercase;
            letter-spacing: 0.08em;
            color: #7b8794;
            margin: 0 0 0.75rem 0;
        }
        ul { margin: 0; padding-left: 1.1rem; }
        li { margin: 0.35rem 0; }
        a { color: #0b3d91; }
        .emergency { background: #fff4f4; border-color: #f5c2c2; }
        .emergency a.call {
            display: inline-block;
            margin-top: 0.5rem;
            padding: 0.6rem 1.2rem;
            background: #c81e1e;
            color: #fff;
            text-decoration: none;
            border-radius: 6px;
            font-weight: 600;
        }
        .muted { color: #7b8794; font-size: 0.85rem; }
"""


def tel_href(phone: str) -> str:
    """tel: link target with spaces removed."""
    return "tel:" + "".join(phone.split())


def emergency_card(phone: str) -> str:
    return f"""
        <section class="card emergency" aria-labelledby="emergency-heading">
            <h2 id="emergency-heading">Need help right now?</h2>
            <p>Our emergency response team is available 24/7.</p>
            <a class="call" href="{escape(tel_href(phone))}">Call {escape(phone)}</a>
        </section>"""


def render_page(title: str, body: str) -> str:
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <style>{_STYLES}</style>
</head>
<body>
    <div class="wrap">{body}
    </div>
</body>
</html>
""".strip()
