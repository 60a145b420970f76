"""Infrastructure layer — Jinja2 document templates."""
