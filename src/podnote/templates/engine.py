"""Placeholder substitution for note and file name templates.

Templates are plain strings with ``{{Name}}`` tokens. Only the first
occurrence of each recognized token is substituted; anything else is left
exactly as written.
"""

from podnote.extraction.models import PodcastMetadata

TITLE = "{{Title}}"
IMAGE_URL = "{{ImageURL}}"
DESCRIPTION = "{{Description}}"
PODCAST_URL = "{{PodcastURL}}"
DATE = "{{Date}}"

PLACEHOLDERS = (TITLE, IMAGE_URL, DESCRIPTION, PODCAST_URL, DATE)

DEFAULT_TEMPLATE = (
    "---\n"
    "tags: [Podcast]\n"
    "date: {{Date}}\n"
    "---\n"
    "# {{Title}}\n"
    "![]({{ImageURL}})\n"
    "## Description:\n"
    "{{Description}}\n"
    "-> [Podcast Link]({{PodcastURL}})\n"
    "## Notes:\n"
)

DEFAULT_FILENAME_TEMPLATE = TITLE

# Characters that would split a file name into path components
UNSAFE_FILENAME_CHARS = ("/", "\\", ":")


def _substitute_first(template: str, values: dict[str, str]) -> str:
    """Replace the first occurrence of each token with its value.

    Positions are located against the original template so a substituted
    value that happens to contain another token is never expanded again.
    """
    spans = []
    for token, value in values.items():
        index = template.find(token)
        if index != -1:
            spans.append((index, index + len(token), value))

    spans.sort()
    parts = []
    cursor = 0
    for start, end, value in spans:
        if start < cursor:
            # Overlapping tokens are impossible with the fixed token set
            continue
        parts.append(template[cursor:start])
        parts.append(value)
        cursor = end
    parts.append(template[cursor:])
    return "".join(parts)


def render_template(template: str, metadata: PodcastMetadata, source_url: str) -> str:
    """Render a note template.

    Args:
        template: Template text containing placeholders
        metadata: Extracted episode metadata
        source_url: URL exactly as the user supplied it

    Returns:
        Rendered note text. Description markup is inserted verbatim.
    """
    return _substitute_first(
        template,
        {
            TITLE: metadata.title,
            IMAGE_URL: metadata.image_url,
            DESCRIPTION: metadata.description,
            PODCAST_URL: source_url,
            DATE: metadata.retrieved_at,
        },
    )


def sanitize_filename(name: str) -> str:
    """Remove path separators and colons from a file name."""
    for char in UNSAFE_FILENAME_CHARS:
        name = name.replace(char, "")
    return name


def render_filename(template: str, metadata: PodcastMetadata) -> str:
    """Render a file name template (``{{Title}}`` and ``{{Date}}`` only)."""
    rendered = _substitute_first(
        template,
        {TITLE: metadata.title, DATE: metadata.retrieved_at},
    )
    return sanitize_filename(rendered)
