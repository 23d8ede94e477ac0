from .html import HTML_HEADER, HTML_FOOTER, html_page, write_html_table

__all__ = ["HTML_HEADER", "HTML_FOOTER", "html_page", "write_html_table"]
