"""
Markup tokens and lookup tables used by the report generator
"""

from typing import Optional

MARKDOWN = 'markdown'
ASCIIDOC = 'adoc'

# Style token (lowercase) -> report style
STYLE_ALIASES = {
    'markdown': MARKDOWN,
    'md': MARKDOWN,
    'adoc': ASCIIDOC,
    'asciidoc': ASCIIDOC,
}

FILE_EXTENSIONS = {
    MARKDOWN: '.md',
    ASCIIDOC: '.adoc',
}

MARKDOWN_HEADER = '###'
MARKDOWN_SEPARATOR_2 = '| :--------: | :--------: |'
MARKDOWN_SEPARATOR_3 = '| :--------: | :--------: | :--------: |'

ASCIIDOC_HEADER = '==='
ASCIIDOC_TABLE = '|==='

# Lower bound of each status code class, checked from the top down
RESPONSE_CODE_CLASSES = (
    (500, 'Server error responses'),
    (400, 'Client error responses'),
    (300, 'Redirection messages'),
    (200, 'Successful responses'),
)
INFORMATIONAL_RESPONSES = 'Informational responses'


def resolve_style(style: Optional[str]) -> str:
    """Case-insensitive style lookup; unknown or missing tokens mean Markdown."""
    if not style:
        return MARKDOWN
    return STYLE_ALIASES.get(style.strip().lower(), MARKDOWN)


def response_code_name(code: str) -> str:
    """Human-readable class of an HTTP status code, e.g. '404' -> 'Client error responses'."""
    value = int(code)
    for lower_bound, name in RESPONSE_CODE_CLASSES:
        if value >= lower_bound:
            return name
    return INFORMATIONAL_RESPONSES
