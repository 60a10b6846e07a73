"""Isolated preview rendering for generated page HTML.

Generated markup is written into its own standalone document, meant to be
loaded in a sandboxed iframe, so it never shares a DOM or stylesheet with the
host UI.
"""

import html

WAITING_HTML = "<main class='container'><h1>Waiting for output…</h1></main>"

BASELINE_STYLESHEET = """
:root { color-scheme: light dark; }
body { margin: 0; font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Inter, Arial, sans-serif; }
img, video { max-width: 100%; height: auto; display: block; }
.container { max-width: 960px; margin: 0 auto; padding: 24px; }
.muted { opacity: .85 }
.grid { display: grid; gap: 16px; }
.btn { display:inline-flex; align-items:center; gap:8px; padding:10px 14px; border-radius:12px; background:#111; color:#fff; text-decoration:none; }
.cta { border:1px solid #e5e5e5; padding:16px; border-radius:16px; }
"""

PREVIEW_TEMPLATE = """<!doctype html><html><head><meta charset="utf-8" />
<meta name="viewport" content="width=device-width, initial-scale=1" />
<style>{stylesheet}</style>
</head><body>{body}</body></html>"""

# Scripts, forms and same-origin access stay disabled inside the frame
FRAME_SANDBOX = ""

# Same restrictions for the preview document when it is served on its own
PREVIEW_HEADERS = {"Content-Security-Policy": "sandbox"}


def render_preview(page_html: str | None) -> str:
    """Return a standalone document with the baseline styles and ``page_html``.

    Falls back to a waiting placeholder when there is nothing to show yet.
    Identical input always yields identical output.
    """
    return PREVIEW_TEMPLATE.format(
        stylesheet=BASELINE_STYLESHEET,
        body=page_html or WAITING_HTML,
    )


def render_frame(page_html: str | None, title: str = "Rendered Preview") -> str:
    """Wrap the preview document in a sandboxed ``<iframe srcdoc>`` element."""
    document = html.escape(render_preview(page_html), quote=True)
    return (
        f'<iframe title="{html.escape(title, quote=True)}" '
        f'sandbox="{FRAME_SANDBOX}" srcdoc="{document}" '
        f'style="width:100%;height:520px;border:0"></iframe>'
    )
