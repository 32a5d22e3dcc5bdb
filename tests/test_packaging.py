# tests/test_packaging.py

import io
import zipfile

import pytest

from semphcode.packaging import build_archive, get_project_name, project_files


@pytest.mark.parametrize(
    "html, expected",
    [
        ("<title>My Landing Page!</title>", "my-landing-page"),
        ("<TITLE>  Café 2024 </TITLE>", "caf-2024"),
        ("<title>!!!</title>", "projeto"),
        ("<html></html>", "projeto"),
    ],
)
def test_project_name_from_title(html, expected):
    assert get_project_name(html) == expected


def test_project_layout(sample_document):
    layout = project_files(sample_document)
    root = "my-landing-page"

    assert "<style" not in layout[f"{root}/index.html"]
    assert layout[f"{root}/css/main.css"] == "body { margin: 0; }"
    assert layout[f"{root}/css/styles-2.css"] == ".late { color: blue; }"
    assert layout[f"{root}/css/styles.css"].count("/* CSS Block */") == 2
    assert layout[f"{root}/js/main.js"] == 'console.log("first");'
    assert layout[f"{root}/js/script-2.js"] == 'console.log("second");'
    assert layout[f"{root}/components/header.html"] == '<header id="top"><h1>Hi</h1></header>'
    assert "section-hero.html" in layout[f"{root}/README.md"]


def test_single_blocks_are_not_split_out():
    html = (
        "<html><head><title>One</title><style>a{}</style></head>"
        "<body><script>b()</script></body></html>"
    )
    layout = project_files(html)

    assert set(layout) == {
        "one/index.html",
        "one/css/styles.css",
        "one/js/script.js",
        "one/README.md",
    }


def test_archive_contains_layout(sample_document):
    archive = zipfile.ZipFile(io.BytesIO(build_archive(sample_document)))
    assert sorted(archive.namelist()) == sorted(project_files(sample_document))
    assert archive.read("my-landing-page/js/main.js").decode() == 'console.log("first");'
