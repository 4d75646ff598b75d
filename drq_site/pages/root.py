"""Landing page with links to the API and its documentation."""

from html import escape

from drq_site.pages._layout import emergency_card, render_page


def render_root_page(app_name: str, phone: str) -> str:
    """Return HTML for the root landing page."""
    body = f"""
        <header>
            <h1>{escape(app_name)}</h1>
            <p class="lead">Water, fire and mould restoration across South East Queensland.</p>
        </header>
        <section class="card" aria-labelledby="api-heading">
            <h2 id="api-heading">API</h2>
            <ul>
                <li><a href="/api/search?q=water">/api/search</a> site search</li>
                <li><a href="/api/services">/api/services</a> restoration services</li>
                <li><a href="/api/service-areas">/api/service-areas</a> service areas</li>
                <li><a href="/docs">/docs</a> interactive documentation</li>
            </ul>
        </section>{emergency_card(phone)}"""
    return render_page(app_name, body)
