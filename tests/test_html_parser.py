from pane_browser.dom import Element, HTMLParser, Text, enclosing_link, tree_to_list

ARTICLE = (
    '<div class="mw-parser-output">'
    '<!-- cached 2024 -->'
    '<style>.mw-parser-output .hatnote{font-style:italic}</style>'
    '<p>The <b>cat</b> &amp; the <a href="/wiki/Dog" title="Dog">dog</a>.<br/>'
    '<a href="#cite_note-1">[1]</a></p>'
    '</div>'
)


def texts(tree):
    return [node.text for node in tree_to_list(tree, []) if isinstance(node, Text)]


def test_fragment_gets_implicit_html_and_body():
    root = HTMLParser("<p>hi</p>").parse()
    assert root.tag == "html"
    body = root.children[0]
    assert body.tag == "body"
    assert body.children[0].tag == "p"


def test_comments_and_style_are_dropped():
    root = HTMLParser(ARTICLE).parse()
    joined = "".join(texts(root))
    assert "cached" not in joined
    assert "font-style" not in joined
    assert "The " in joined


def test_entities_are_unescaped():
    root = HTMLParser(ARTICLE).parse()
    assert " & the " in texts(root)


def test_attributes_and_self_closing_tags():
    root = HTMLParser('<p class="lead" hidden>a<br/>b<img src="x.png" alt="A &quot;cat&quot;"></p>').parse()
    p = root.children[0].children[0]
    assert p.attributes == {"class": "lead", "hidden": ""}
    tags = [child.tag for child in p.children if isinstance(child, Element)]
    assert tags == ["br", "img"]
    assert p.children[-1].attributes["alt"] == 'A "cat"'


def test_unmatched_closing_tag_is_ignored():
    root = HTMLParser("<p>one</span>two</p>").parse()
    p = root.children[0].children[0]
    assert [child.text for child in p.children] == ["one", "two"]


def test_anchors_keep_href_and_title():
    root = HTMLParser(ARTICLE).parse()
    anchors = [n for n in tree_to_list(root, []) if isinstance(n, Element) and n.tag == "a"]
    assert [a.attributes for a in anchors] == [
        {"href": "/wiki/Dog", "title": "Dog"},
        {"href": "#cite_note-1"},
    ]


def test_enclosing_link_walks_up_to_anchor():
    root = HTMLParser('<p><a href="/wiki/Dog" title="Dog"><i>good</i> dog</a> outside</p>').parse()
    nodes = tree_to_list(root, [])
    good = next(n for n in nodes if isinstance(n, Text) and n.text == "good")
    outside = next(n for n in nodes if isinstance(n, Text) and n.text == " outside")
    assert enclosing_link(good).attributes["href"] == "/wiki/Dog"
    assert enclosing_link(outside) is None


def test_many_raw_text_blocks_keep_surrounding_text():
    blocks = "".join(
        f'<style data-mw-deduplicate="t{n}">.x{n}{{color:red}}</STYLE><p>para {n}</p>'
        for n in range(20)
    )
    # İ lowercases to two code points, so indices must come from the original text
    root = HTMLParser("<p>İstanbul</p>" + blocks + "<script>var a = '<p>';</script><p>end</p>").parse()
    assert texts(root) == ["İstanbul"] + [f"para {n}" for n in range(20)] + ["end"]
