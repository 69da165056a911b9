"""Export blocs → HTML."""
from .html import export_html, export_body_html, render_block, render_section

__all__ = ["export_html", "export_body_html", "render_block", "render_section"]
