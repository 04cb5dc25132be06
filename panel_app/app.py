"""Panel application for exploring and reordering a matrix."""

import panel as pn
from typing import Optional

from matrix_reorder.utils.logging_config import setup_logging

from panel_app.components import create_sidebar_widgets
from panel_app.helpers import HEADER_BG, HEADER_FG, create_explorer

NOTEBOOK_THEME_RESET = """
body {
    background-color: var(--jp-layout-color0, inherit) !important;
}
"""

_extra_css = []
_state_env = getattr(pn.state, "env", None)
_is_notebook = bool(getattr(pn.state, "_is_notebook", False)) or _state_env == "notebook"
if _is_notebook:
    _extra_css.append(NOTEBOOK_THEME_RESET)

# Configure Panel extensions once on import
pn.extension(
    'tabulator',
    design='material',
    sizing_mode='stretch_width',
    raw_css=_extra_css,
    notifications=True,
)


def create_app() -> pn.template.FastListTemplate:
    """Create and return the Panel application template."""
    explorer = create_explorer()
    template = pn.template.FastListTemplate(
        title="Matrix Reorder",
        sidebar=create_sidebar_widgets(explorer),
        main=[explorer.view()],
        header_background=HEADER_BG,
        header_color=HEADER_FG,
    )
    return template


def serve_app(
    address: str = "localhost",
    port: int = 5006,
    route: Optional[str] = None,
    open_browser: bool = False,
    **kwargs,
):
    """Start the app on a background server and return the handle and URL."""
    if route:
        normalized = route.strip("/")
        if normalized:
            objects = {normalized: create_app}
            url_path = f"/{normalized}"
        else:
            objects = create_app
            url_path = "/"
    else:
        objects = create_app
        url_path = "/"

    serve_kwargs = {
        "address": address,
        "port": port,
        "show": open_browser,
        "start": True,
    }
    serve_kwargs.update(kwargs)
    serve_kwargs.setdefault("threaded", True)

    server = pn.serve(objects, **serve_kwargs)

    resolved_address = address or "localhost"
    resolved_port = getattr(server, "port", port)
    url = f"http://{resolved_address}:{resolved_port}{url_path}"

    return server, url


def main():
    """Main entry point for the application."""
    setup_logging()
    pn.serve(create_app, port=5006, show=True)


if __name__ == "__main__":
    create_app().servable()

if __name__.startswith("bokeh_app"):
    setup_logging()
    create_app().servable()
