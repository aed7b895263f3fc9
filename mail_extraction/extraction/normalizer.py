"""
Body Normalizer — raw (possibly HTML) e-mail body to readable plain text.

The body is parsed once with BeautifulSoup ("html.parser"). Steps are
order-sensitive:
    1. Drop comments and <style>/<script>/<head> regions
    2. Replace <img src alt> tags with "[image: alt]" markers
    3. Convert structural tags (br, p, headings, emphasis, links, blockquote)
    4. Any other tag becomes a space
    5. Character entities are decoded by the parser
    6. Collapse blank lines and horizontal whitespace, trim lines

Steps 2-4 happen in a single walk over the parse tree. Unclosed tags nest
arbitrarily deep in "html.parser" output, so the walk keeps its own stack
and never edits the tree.
"""
import logging
import re
import warnings
from typing import List, Tuple

from bs4 import (
    BeautifulSoup,
    Comment,
    Declaration,
    Doctype,
    MarkupResemblesLocatorWarning,
    NavigableString,
    ProcessingInstruction,
    Tag,
)

from mail_extraction.config.settings import MAX_BODY_LOG_CHARS
from mail_extraction.errors import MalformedInputError
from mail_extraction.models.parsed_content import ImageInfo, ImageKind
from mail_extraction.output.metrics import record_normalizer_fallback

logger = logging.getLogger(__name__)

# Plain-text bodies such as "www.example.com" are valid input here.
warnings.filterwarnings("ignore", category=MarkupResemblesLocatorWarning)

_NOISE_TAGS = ["style", "script", "head"]
_SKIPPED_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)

_IMAGE_MARKER = re.compile(r"\[image:\s*([^\]]+)\]", re.IGNORECASE)

# tag name -> (text emitted before the content, text emitted after it)
_WRAPPERS = {
    "p": ("", "\n\n"),
    "div": ("", "\n"),
    "tr": ("", "\n"),
    "li": ("\n- ", ""),
    "strong": ("**", "**"),
    "b": ("**", "**"),
    "em": ("*", "*"),
    "i": ("*", "*"),
}
_WRAPPERS.update({f"h{n}": ("\n\n", "\n\n") for n in range(1, 7)})

_HSPACE = re.compile(r"[ \t\f\v\xa0]+")
_BLANK_RUNS = re.compile(r"\n{3,}")


def classify_image(description: str) -> ImageKind:
    """Classify an image from its description text."""
    desc = description.lower()
    if "photo" in desc or "picture" in desc:
        return ImageKind.PHOTO
    if "icon" in desc:
        return ImageKind.ICON
    if "logo" in desc:
        return ImageKind.LOGO
    return ImageKind.ATTACHMENT


def _remove_noise(soup: BeautifulSoup) -> None:
    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()
    for tag in soup.find_all(_NOISE_TAGS):
        tag.decompose()


def _collect_markers(soup: BeautifulSoup, images: List[ImageInfo]) -> None:
    """Report "[image: ...]" markers already present in the text."""
    for string in soup.find_all(string=True):
        if isinstance(string, _SKIPPED_STRINGS):
            continue
        for match in _IMAGE_MARKER.finditer(string):
            description = match.group(1).strip()
            images.append(
                ImageInfo(kind=classify_image(description), description=description, alt=description)
            )


def _image_marker(img: Tag, images: List[ImageInfo]) -> str:
    src = img.get("src")
    alt = img.get("alt")
    if not src or alt is None:
        return " "
    description = alt.strip() or "image"
    images.append(
        ImageInfo(
            kind=classify_image(description),
            description=description,
            alt=alt,
            inline=True,
            src=src,
        )
    )
    return f"[image: {description}]"


def _quote(text: str) -> str:
    lines = text.strip("\n").split("\n")
    return "\n" + "\n".join(f"> {line.strip()}" for line in lines) + "\n"


def _closing_text(tag: Tag) -> str:
    if tag.name in _WRAPPERS:
        return _WRAPPERS[tag.name][1]
    if tag.name == "a" and tag.get("href") is not None:
        return f" ({tag['href']})"
    return " "


def _render(soup: BeautifulSoup, images: List[ImageInfo]) -> str:
    """
    Flatten the tree to text in document order.

    Each blockquote collects its content in its own buffer, which is quoted
    line by line when the blockquote closes (innermost first).
    """
    buffers: List[List[str]] = [[]]
    # (node, closing); closing entries emit a tag's trailing text
    stack = [(child, False) for child in reversed(soup.contents)]

    while stack:
        node, closing = stack.pop()

        if closing:
            if node.name == "blockquote":
                inner = "".join(buffers.pop())
                buffers[-1].append(_quote(inner))
            else:
                buffers[-1].append(_closing_text(node))
            continue

        if isinstance(node, NavigableString):
            if not isinstance(node, _SKIPPED_STRINGS):
                buffers[-1].append(str(node))
            continue

        name = node.name
        if name == "br":
            buffers[-1].append("\n")
            continue
        if name == "img":
            buffers[-1].append(_image_marker(node, images))
            continue

        if name == "blockquote":
            buffers.append([])
        elif name in _WRAPPERS:
            buffers[-1].append(_WRAPPERS[name][0])
        elif name != "a" or node.get("href") is None:
            buffers[-1].append(" ")

        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.contents))

    return "".join(buffers[0])


def _collapse_whitespace(text: str) -> str:
    text = _HSPACE.sub(" ", text)
    text = "\n".join(line.strip() for line in text.split("\n"))
    return _BLANK_RUNS.sub("\n\n", text).strip()


def html_to_text(raw_body: str) -> Tuple[str, List[ImageInfo]]:
    """
    Convert a raw body to clean text.

    Raises:
        MalformedInputError: If ``raw_body`` is not a string.
    """
    if not isinstance(raw_body, str):
        raise MalformedInputError(f"expected str body, got {type(raw_body).__name__}")

    text = raw_body.replace("\r\n", "\n").replace("\r", "\n")
    soup = BeautifulSoup(text, "html.parser")

    # 1. Noise regions
    _remove_noise(soup)

    # 2. Markers already present in plain-text bodies; <img> tags follow in the walk
    images: List[ImageInfo] = []
    _collect_markers(soup, images)

    # 2-5. Images, structure, remaining tags; entities were decoded on parse
    flattened = _render(soup, images)

    # 6. Whitespace
    return _collapse_whitespace(flattened), images


def normalize_body(raw_body: str) -> Tuple[str, List[ImageInfo]]:
    """
    Normalize a raw body; never raises.

    On any failure the original input is returned unchanged as the text,
    together with an empty image list.

    Returns:
        (cleaned_text, images)
    """
    try:
        return html_to_text(raw_body)
    except Exception as e:
        logger.error("Body normalization failed, keeping raw body: %s", e)
        if isinstance(raw_body, str):
            logger.debug("Raw body preview: %r", raw_body[:MAX_BODY_LOG_CHARS])
        record_normalizer_fallback()
        return raw_body, []
