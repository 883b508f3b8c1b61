"""HTML helpers for rendering user-supplied text into notification emails."""

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}


def escape_html(text) -> str:
    """
    Escape the five HTML-significant characters in ``text``.

    Non-string values are converted with ``str()`` first.

    Example:
        >>> escape_html('<b>"Tom" & \\'Jerry\\'</b>')
        '&lt;b&gt;&quot;Tom&quot; &amp; &#039;Jerry&#039;&lt;/b&gt;'
    """
    return "".join(_HTML_ESCAPES.get(char, char) for char in str(text))


def escape_multiline_html(text) -> str:
    """Escape ``text`` and turn newlines into ``<br>`` tags."""
    return escape_html(text).replace("\n", "<br>")
