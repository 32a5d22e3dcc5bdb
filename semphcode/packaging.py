"""Lays out a generated page as a downloadable multi-file project"""

import io
import re
import zipfile
from typing import Dict

from semphcode.models import SeparatedFiles
from semphcode.separator import decompose, combine_styles, combine_scripts
from semphcode.logger import get_logger

logger = get_logger(__name__)

DEFAULT_PROJECT_NAME = "projeto"
TITLE_PATTERN = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)


def get_project_name(html: str) -> str:
    """Folder-safe project name taken from the page title"""
    match = TITLE_PATTERN.search(html)
    if not match:
        return DEFAULT_PROJECT_NAME
    name = re.sub(r"[^a-z0-9]+", "-", match.group(1).lower()).strip("-")
    return name or DEFAULT_PROJECT_NAME


def _indexed_names(prefix: str, first: str, extension: str, count: int):
    return [first] + [f"{prefix}-{index + 1}.{extension}" for index in range(1, count)]


def build_readme(project_name: str, files: SeparatedFiles) -> str:
    lines = [
        f"# Project {project_name.capitalize()}",
        "",
        "This project was generated automatically and is organized as follows:",
        "",
        "```",
        f"/{project_name}",
        "│── index.html           # Main HTML file",
        "│── /css                 # Stylesheets",
        "│   ├── styles.css       # Combined styles",
    ]
    if len(files.styles) > 1:
        lines.append("│   ├── main.css         # Main stylesheet")
        lines.append("│   ├── styles-2.css     # Additional styles")
    if len(files.styles) > 2:
        lines.append("│   └── ... other styles")
    lines += [
        "│── /js                  # Scripts",
        "│   ├── script.js        # Combined scripts",
    ]
    if len(files.scripts) > 1:
        lines.append("│   ├── main.js          # Main script")
        lines.append("│   ├── script-2.js      # Additional scripts")
    if len(files.scripts) > 2:
        lines.append("│   └── ... other scripts")
    lines.append("│── /components          # Reusable HTML components")
    lines += [f"│   ├── {name}.html" for name in files.components]
    lines += [
        "```",
        "",
        "## Usage",
        "",
        "1. Extract all files into one folder, keeping the directory structure",
        "2. Open `index.html` in your browser",
        "",
        "## Editing",
        "",
        "- Edit components individually in the `components` folder",
        "- Edit styles in the `css` folder",
        "- Update scripts in the `js` folder",
        "- `index.html` already references the CSS and JavaScript files",
        "",
    ]
    return "\n".join(lines)


def project_files(html: str) -> Dict[str, str]:
    """Map of archive path to file content for a generated page"""
    files = decompose(html)
    project_name = get_project_name(html)
    root = project_name

    layout = {f"{root}/index.html": files.skeleton}

    if files.styles:
        layout[f"{root}/css/styles.css"] = combine_styles(files.styles)
        if len(files.styles) > 1:
            names = _indexed_names("styles", "main.css", "css", len(files.styles))
            for name, css in zip(names, files.styles):
                layout[f"{root}/css/{name}"] = css

    if files.scripts:
        layout[f"{root}/js/script.js"] = combine_scripts(files.scripts)
        if len(files.scripts) > 1:
            names = _indexed_names("script", "main.js", "js", len(files.scripts))
            for name, js in zip(names, files.scripts):
                layout[f"{root}/js/{name}"] = js

    for name, content in files.components.items():
        layout[f"{root}/components/{name}.html"] = content

    layout[f"{root}/README.md"] = build_readme(project_name, files)
    return layout


def build_archive(html: str) -> bytes:
    """Zip the project layout for download"""
    layout = project_files(html)
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for path, content in layout.items():
            archive.writestr(path, content)
    logger.info(f"Built project archive with {len(layout)} files")
    return buffer.getvalue()
