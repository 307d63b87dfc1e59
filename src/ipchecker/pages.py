"""Response rendering for the index page and health probe."""

from html import escape

from fastapi.responses import HTMLResponse, Response

INDEX_TEMPLATE = """
<html>
  <head><title>IP Checker</title></head>
  <body>
    <h1>Your IP is: {address}</h1>
  </body>
</html>
"""


def render_index(address: str) -> HTMLResponse:
    """Render the index page. The address comes from a client-controlled header."""
    return HTMLResponse(INDEX_TEMPLATE.format(address=escape(address)))


def render_health() -> Response:
    """Render the health probe response: 200 with an empty body."""
    return Response(status_code=200)
