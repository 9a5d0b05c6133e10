import html


def escape_html(text: str) -> str:
    """Replace & < > " ' with their HTML entities"""
    return html.escape(text, quote=True)
