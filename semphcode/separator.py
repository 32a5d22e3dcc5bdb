"""
Splits a generated HTML document into separate files and puts them back together.

The editor shows a generated page as index.html plus css/, js/ and components/
files, and renders the preview from a single document again. Matching is done
with regular expressions: generated pages are well-formed, and anything the
patterns miss (nested same-tag blocks, attributes containing ">") simply stays
in the skeleton.
"""

import re
from typing import Dict, List

from semphcode.models import SeparatedFiles
from semphcode.logger import get_logger

logger = get_logger(__name__)

STYLESHEET_HREF = "css/styles.css"
SCRIPT_SRC = "js/script.js"
STYLESHEET_LINK = f'<link rel="stylesheet" href="{STYLESHEET_HREF}">'
SCRIPT_REFERENCE = f'<script src="{SCRIPT_SRC}"></script>'

CSS_BLOCK_MARKER = "/* CSS Block */"
JS_BLOCK_MARKER = "// JavaScript Block"

STYLE_PATTERN = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.IGNORECASE)
SCRIPT_PATTERN = re.compile(r"<script([^>]*)>([\s\S]*?)</script>", re.IGNORECASE)
SRC_ATTRIBUTE = re.compile(r"(?:^|\s)src\s*=", re.IGNORECASE)

# Boundary markers written by combine_styles / combine_scripts, on their own line
CSS_BOUNDARY = re.compile(r"^[ \t]*/\* CSS Block \*/[ \t]*$", re.MULTILINE)
JS_BOUNDARY = re.compile(r"^[ \t]*// JavaScript Block[ \t]*$", re.MULTILINE)

LANDMARK_TAGS = ("header", "footer", "nav")
SECTION_PATTERN = re.compile(
    r"<section[^>]*?(?:id=[\"']([^\"']+)[\"']|class=[\"']([^\"']+)[\"'])[^>]*>([\s\S]*?)</section>",
    re.IGNORECASE,
)
DIV_PATTERN = re.compile(
    r"<div[^>]*?(?:id=[\"']([^\"']+)[\"']|class=[\"']([^\"']+)[\"'])[^>]*>([\s\S]*?)</div>",
    re.IGNORECASE,
)
COMPONENT_KEYWORDS = (
    "container",
    "component",
    "wrapper",
    "card",
    "modal",
    "menu",
    "list",
    "item",
    "widget",
)
MAX_COMPONENT_LENGTH = 5000


def _split_blocks(text: str, boundary: re.Pattern) -> List[str]:
    """Trim a block body and split it on combine markers, dropping empty parts"""
    return [part.strip() for part in boundary.split(text) if part.strip()]


def _is_external_script(attributes: str) -> bool:
    return bool(SRC_ATTRIBUTE.search(attributes))


def _component_name(element_id: str | None, class_name: str | None) -> str:
    if element_id:
        return element_id
    classes = (class_name or "").split()
    return classes[0] if classes else ""


def extract_styles(html: str) -> List[str]:
    """Return the trimmed body of every <style> block, in document order"""
    blocks = []
    for match in STYLE_PATTERN.finditer(html):
        blocks.extend(_split_blocks(match.group(1), CSS_BOUNDARY))
    return blocks


def extract_scripts(html: str) -> List[str]:
    """Return the trimmed body of every inline <script> block, in document order"""
    blocks = []
    for match in SCRIPT_PATTERN.finditer(html):
        if _is_external_script(match.group(1)):
            continue
        blocks.extend(_split_blocks(match.group(2), JS_BOUNDARY))
    return blocks


def extract_components(html: str) -> Dict[str, str]:
    """Find named fragments worth showing as separate component files.

    The first <header>, <footer> and <nav> are taken as-is. Sections are named
    after their id or first class. Divs only count when their id or class
    mentions one of COMPONENT_KEYWORDS and the fragment stays under
    MAX_COMPONENT_LENGTH. Two fragments deriving the same name overwrite each
    other, the later one wins.
    """
    components = {}

    for tag in LANDMARK_TAGS:
        match = re.search(rf"<{tag}[^>]*>[\s\S]*?</{tag}>", html, re.IGNORECASE)
        if match:
            components[tag] = match.group(0)

    for match in SECTION_PATTERN.finditer(html):
        name = _component_name(match.group(1), match.group(2))
        if name:
            components[f"section-{name}"] = match.group(0)

    for match in DIV_PATTERN.finditer(html):
        element_id, class_name = match.group(1), match.group(2)
        marked = any(
            value and any(word in value for word in COMPONENT_KEYWORDS)
            for value in (element_id, class_name)
        )
        if not marked:
            continue
        name = _component_name(element_id, class_name)
        if name and len(match.group(0)) < MAX_COMPONENT_LENGTH:
            components[f"component-{name}"] = match.group(0)

    return components


def clean_html(html: str) -> str:
    """Remove inline <style> and <script> blocks, keeping scripts loaded by src"""
    cleaned = STYLE_PATTERN.sub("", html)

    def keep_external(match):
        return match.group(0) if _is_external_script(match.group(1)) else ""

    return SCRIPT_PATTERN.sub(keep_external, cleaned)


def add_external_links(html: str) -> str:
    """Reference the combined stylesheet and script files from the skeleton"""
    updated = html
    if STYLESHEET_LINK not in updated:
        updated = updated.replace("</head>", f"  {STYLESHEET_LINK}\n</head>", 1)
    if SCRIPT_REFERENCE not in updated:
        updated = updated.replace("</body>", f"  {SCRIPT_REFERENCE}\n</body>", 1)
    return updated


def decompose(html_text: str) -> SeparatedFiles:
    """Split a document into skeleton, styles, scripts and components"""
    if not html_text:
        return SeparatedFiles()

    styles = extract_styles(html_text)
    scripts = extract_scripts(html_text)
    components = extract_components(html_text)
    skeleton = clean_html(html_text)

    # Only point at external files when there is something to put in them
    if styles or scripts:
        skeleton = add_external_links(skeleton)

    logger.debug(
        f"Decomposed document of length {len(html_text)}: {len(styles)} styles, "
        f"{len(scripts)} scripts, {len(components)} components"
    )
    return SeparatedFiles(
        skeleton=skeleton, styles=styles, scripts=scripts, components=components
    )


def combine_styles(styles: List[str]) -> str:
    if not styles:
        return ""
    return "\n\n".join(f"{CSS_BLOCK_MARKER}\n{css}\n" for css in styles)


def combine_scripts(scripts: List[str]) -> str:
    if not scripts:
        return ""
    return "\n\n".join(f"{JS_BLOCK_MARKER}\n{js}\n" for js in scripts)


def compose(files: SeparatedFiles) -> str:
    """Inline the styles and scripts back into the skeleton for rendering.

    Components are not consulted; they are views onto the skeleton.
    """
    if not files.skeleton:
        return ""

    combined = files.skeleton

    if files.styles:
        combined = combined.replace(
            "</head>", f"  <style>\n{combine_styles(files.styles)}\n  </style>\n</head>", 1
        )

    if files.scripts:
        combined = combined.replace(
            "</body>",
            f"  <script>\n{combine_scripts(files.scripts)}\n  </script>\n</body>",
            1,
        )

    return combined
