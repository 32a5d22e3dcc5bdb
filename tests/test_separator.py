# tests/test_separator.py

import pytest

from semphcode.models import SeparatedFiles
from semphcode.separator import (
    decompose,
    compose,
    combine_styles,
    combine_scripts,
    extract_components,
    extract_scripts,
    extract_styles,
    clean_html,
    STYLESHEET_LINK,
    SCRIPT_REFERENCE,
)


def test_decompose_empty_document():
    files = decompose("")
    assert files.skeleton == ""
    assert files.styles == []
    assert files.scripts == []
    assert files.components == {}


def test_decompose_minimal_document():
    html = (
        "<html><head><style>body{color:red}</style></head>"
        "<body><script>alert(1)</script></body></html>"
    )
    files = decompose(html)

    assert files.styles == ["body{color:red}"]
    assert files.scripts == ["alert(1)"]
    assert files.skeleton == (
        '<html><head>  <link rel="stylesheet" href="css/styles.css">\n</head>'
        '<body>  <script src="js/script.js"></script>\n</body></html>'
    )


def test_decompose_sample_document(sample_document):
    files = decompose(sample_document)

    assert files.styles == ["body { margin: 0; }", ".late { color: blue; }"]
    assert files.scripts == ['console.log("first");', 'console.log("second");']
    assert "<style" not in files.skeleton
    assert "console.log" not in files.skeleton
    assert '<script src="https://cdn.tailwindcss.com"></script>' in files.skeleton
    assert STYLESHEET_LINK in files.skeleton
    assert SCRIPT_REFERENCE in files.skeleton


def test_components_from_sample_document(sample_document):
    components = decompose(sample_document).components

    assert components["header"] == '<header id="top"><h1>Hi</h1></header>'
    assert components["nav"] == '<nav class="main-navigation"><a href="#">Home</a></nav>'
    assert components["footer"] == '<footer class="site-footer">Bye</footer>'
    assert components["section-hero"] == (
        '<section id="hero" class="hero-component"><p>Hero</p></section>'
    )
    assert components["section-features"] == (
        '<section class="features grid"><p>Features</p></section>'
    )
    assert components["component-card-component"] == (
        '<div class="card-component shadow"><p>Card</p></div>'
    )
    assert set(components) == {
        "header",
        "nav",
        "footer",
        "section-hero",
        "section-features",
        "component-card-component",
    }


def test_header_component_is_exact_fragment():
    html = '<html><body><header id="top">Hi</header></body></html>'
    assert decompose(html).components["header"] == '<header id="top">Hi</header>'


def test_components_do_not_change_skeleton():
    html = '<html><body><header id="top">Hi</header></body></html>'
    assert decompose(html).skeleton == html


def test_sections_with_same_name_last_wins():
    html = (
        '<section class="dup">one</section>'
        '<section class="dup other">two</section>'
    )
    components = extract_components(html)
    assert components == {"section-dup": '<section class="dup other">two</section>'}


def test_section_without_id_or_class_is_ignored():
    assert extract_components("<section>plain</section>") == {}


@pytest.mark.parametrize(
    "div, expected",
    [
        ('<div id="product-list">x</div>', "component-product-list"),
        ('<div class="modal open">x</div>', "component-modal"),
        ('<div id="MainContainer">x</div>', None),
        ('<div class="hero">x</div>', None),
    ],
)
def test_div_components_need_a_keyword(div, expected):
    components = extract_components(div)
    if expected is None:
        assert components == {}
    else:
        assert components == {expected: div}


def test_large_div_is_not_a_component():
    div = '<div class="card">' + "x" * 5000 + "</div>"
    assert extract_components(div) == {}


def test_styles_are_case_insensitive_and_trimmed():
    html = "<STYLE media='all'>\n  a { color: red; }\n</STYLE><style>   </style>"
    assert extract_styles(html) == ["a { color: red; }"]


def test_external_scripts_are_left_in_place():
    external = '<script type="module" src="app.js"></script>'
    html = (
        f"<html><head>{external}</head>"
        "<body><script data-src-free='1'>var a = 1;</script></body></html>"
    )
    files = decompose(html)

    assert files.scripts == ["var a = 1;"]
    assert external in files.skeleton
    assert files.skeleton.count(external) == 1


def test_script_mentioning_src_in_body_is_extracted():
    html = '<script>img.src = "a.png";</script>'
    assert extract_scripts(html) == ['img.src = "a.png";']
    assert clean_html(html) == ""


def test_missing_anchors_leave_skeleton_without_links():
    files = decompose("<div><style>a{}</style><script>b()</script></div>")
    assert files.styles == ["a{}"]
    assert files.scripts == ["b()"]
    assert files.skeleton == "<div></div>"


def test_no_artifacts_means_no_links():
    html = "<html><head></head><body><p>hi</p></body></html>"
    assert decompose(html).skeleton == html


def test_combine_styles_and_scripts():
    assert combine_styles([]) == ""
    assert combine_scripts([]) == ""
    assert combine_styles(["a{}", "b{}"]) == "/* CSS Block */\na{}\n\n\n/* CSS Block */\nb{}\n"
    assert combine_scripts(["x()"]) == "// JavaScript Block\nx()\n"


def test_compose_inlines_styles_and_scripts():
    files = SeparatedFiles(
        skeleton="<html><head></head><body></body></html>",
        styles=["a{}"],
        scripts=["x()"],
        components={"header": "<header>ignored</header>"},
    )
    assert compose(files) == (
        "<html><head>  <style>\n/* CSS Block */\na{}\n\n  </style>\n</head>"
        "<body>  <script>\n// JavaScript Block\nx()\n\n  </script>\n</body></html>"
    )


def test_compose_empty_skeleton():
    assert compose(SeparatedFiles(styles=["a{}"])) == ""


def test_compose_without_anchors_is_a_noop():
    files = SeparatedFiles(skeleton="<div></div>", styles=["a{}"], scripts=["x()"])
    assert compose(files) == "<div></div>"


def test_compose_is_repeatable(sample_document):
    files = decompose(sample_document)
    assert compose(files) == compose(files)


def test_round_trip_keeps_every_block_once_in_order(sample_document):
    original = decompose(sample_document)
    composed = compose(original)

    for block in original.styles + original.scripts:
        assert composed.count(block) == 1
    assert composed.index("body { margin: 0; }") < composed.index(".late { color: blue; }")
    assert composed.index('console.log("first")') < composed.index('console.log("second")')
    assert composed.startswith("<!DOCTYPE html>")
    assert composed.rstrip().endswith("</html>")


def test_round_trip_reaches_fixed_point(sample_document):
    once = decompose(sample_document)
    twice = decompose(compose(decompose(compose(once))))

    assert twice.styles == once.styles
    assert twice.scripts == once.scripts
    assert twice.skeleton.count(STYLESHEET_LINK) == 1
    assert twice.skeleton.count(SCRIPT_REFERENCE) == 1


def test_authored_marker_line_splits_a_block():
    # Marker lines are treated as block boundaries so composed pages split back apart
    assert extract_styles("<style>a{}\n/* CSS Block */\nb{}</style>") == ["a{}", "b{}"]
    assert extract_scripts("<script>x()\n// JavaScript Block\ny()</script>") == ["x()", "y()"]


def test_marker_inside_a_line_does_not_split():
    assert extract_styles("<style>a{} /* CSS Block */ b{}</style>") == [
        "a{} /* CSS Block */ b{}"
    ]
