# SPDX-FileCopyrightText: the httplink contributors
#
# SPDX-License-Identifier: MIT

import unittest

import httplink
from httplink import Link, LinkItem, Uri, InvalidLink


class TestLinkItem(unittest.TestCase):
    def test_parameters(self):
        item = LinkItem.parse("<http://x>; rel=next; title=Foo")
        self.assertEqual(str(item.uri), "http://x")
        self.assertEqual(item.param("rel"), "next")
        self.assertEqual(item.param("title"), "Foo")
        self.assertIsNone(item.param("missing"))

    def test_no_parameters(self):
        item = LinkItem.parse("</sensors/temp>")
        self.assertEqual(item.uri, Uri.parse("/sensors/temp"))
        self.assertEqual(dict(item.params), {})
        self.assertEqual(str(item), "</sensors/temp>")

    def test_duplicate_key(self):
        item = LinkItem.parse("<http://x>; a=1; a=2")
        self.assertEqual(item.param("a"), "2")
        self.assertEqual(len(item.params), 1)

    def test_values_verbatim(self):
        item = LinkItem.parse('<http://x>;title="a b"; q=%20; eq=x=y;  spaced =  v ')
        self.assertEqual(item.param("title"), '"a b"')
        self.assertEqual(item.param("q"), "%20")
        self.assertEqual(item.param("eq"), "x=y")
        # Only the fragment as a whole is trimmed, not the parts around "="
        self.assertEqual(item.param("spaced "), "  v")

    def test_empty_value(self):
        item = LinkItem.parse("<http://x>; rel=")
        self.assertEqual(item.param("rel"), "")

    malformed = [
        "http://x",
        "<http://x",
        "http://x>",
        "<not a uri !!>",
        "<http://x>; rel",
        "<http://x>; rel=next;",
        "<http://x>;",
        " <http://x>",
        "<http://x> ",
        "<>",
        "",
        "<http://x>rel=next",
    ]

    def test_malformed(self):
        for text in self.malformed:
            with self.subTest(text=text):
                with self.assertRaises(InvalidLink):
                    LinkItem.parse(text)

    def test_uri_error_is_hidden(self):
        with self.assertRaises(InvalidLink) as cm:
            LinkItem.parse("<not a uri !!>")
        self.assertEqual(str(cm.exception), "invalid link")
        self.assertIsInstance(cm.exception.__cause__, httplink.MalformedUriError)

    def test_format(self):
        item = LinkItem.with_params("http://x", [("rel", "next"), ("title", "Foo")])
        self.assertIn(str(item), (
            "<http://x>; rel=next; title=Foo",
            "<http://x>; title=Foo; rel=next",
        ))

    def test_with_params(self):
        item = LinkItem.with_params(Uri.parse("/a"), [("a", "1"), ("b", "2"), ("a", "3")])
        self.assertEqual(dict(item.params), {"a": "3", "b": "2"})

        from_mapping = LinkItem.with_params("/a", {"a": "3", "b": "2"})
        self.assertEqual(item, from_mapping)

    def test_with_params_not_text(self):
        with self.assertRaises(TypeError):
            LinkItem.with_params("/a", [(b"rel", "up")])
        with self.assertRaises(TypeError):
            LinkItem.with_params("/a", [("n", 42)])
        with self.assertRaises(TypeError):
            LinkItem.with_params("/a", {"rel": None})
        with self.assertRaises(TypeError):
            LinkItem.with_params("/a", ["ab"])

    def test_params_read_only(self):
        item = LinkItem.with_params("/a", [("rel", "up")])
        with self.assertRaises(TypeError):
            item.params["rel"] = "down"

    def test_bad_constructor_uri(self):
        with self.assertRaises(httplink.MalformedUriError):
            LinkItem("not a uri")

    def test_roundtrip(self):
        item = LinkItem.with_params("https://example.com/p?q=1", [("rel", "next"), ("title", "Foo"), ("n", "42")])
        self.assertEqual(LinkItem.parse(str(item)), item)


class TestLink(unittest.TestCase):
    def test_ordering(self):
        link = Link.parse("<a>,<b>,<c>")
        self.assertEqual([str(i.uri) for i in link], ["a", "b", "c"])
        self.assertEqual(len(link), 3)
        self.assertEqual(str(link[2].uri), "c")

    def test_multiple_with_params(self):
        link = Link.parse("<http://x/1>; rel=prev,<http://x/3>; rel=next; title=Three")
        self.assertEqual(link[0].param("rel"), "prev")
        self.assertEqual(link[1].param("rel"), "next")
        self.assertEqual(link[1].param("title"), "Three")

    def test_empty_format(self):
        self.assertEqual(str(Link()), "")
        self.assertEqual(str(Link([])), "")

    def test_empty_parse(self):
        with self.assertRaises(InvalidLink):
            Link.parse("")

    def test_any_failing_segment(self):
        for text in [
            "<a>,",
            ",<a>",
            "<a>,,<b>",
            "<a>, <b>",
            "<a> ,<b>",
            "<a>,<b>; rel",
            "<a>,<not a uri !!>",
        ]:
            with self.subTest(text=text):
                with self.assertRaises(InvalidLink):
                    Link.parse(text)

    def test_format(self):
        link = Link([LinkItem("/a"), LinkItem.with_params("/b", [("rel", "up")]), LinkItem("/c")])
        self.assertEqual(str(link), "</a>,</b>; rel=up,</c>")

    def test_from_iterable(self):
        link = Link(LinkItem(u) for u in ("/x", "/y"))
        self.assertEqual(link.items, (LinkItem("/x"), LinkItem("/y")))

    def test_rejects_other_items(self):
        with self.assertRaises(TypeError):
            Link(["</a>"])

    def test_roundtrip(self):
        original = Link([
            LinkItem.with_params("http://example.com/page/2", [("rel", "next"), ("title", "Two")]),
            LinkItem.with_params("/page/0", [("rel", "prev")]),
            LinkItem("urn:isbn:0451450523"),
        ])
        parsed = Link.parse(str(original))
        self.assertEqual(parsed, original)
        self.assertEqual([str(i.uri) for i in parsed], [str(i.uri) for i in original])

    def test_parse_idempotent(self):
        text = "</a>; rel=up; title=A,</b>"
        self.assertEqual(Link.parse(text), Link.parse(text))
        link = Link.parse(text)
        self.assertEqual(str(link), str(link))

    def test_py_conversion(self):
        link = Link.parse("</a>; rel=up,</b>")
        self.assertEqual(link.to_py(), [["/a", {"rel": "up"}], ["/b", {}]])
        self.assertEqual(Link.from_py(link.to_py()), link)
        self.assertEqual(Link.from_py([["/a", [["rel", "up"]]]]), Link.parse("</a>; rel=up"))
        with self.assertRaises(TypeError):
            Link.from_py([["/a", ["ab"]]])
        with self.assertRaises(TypeError):
            Link.from_py([["/a", {"n": 1}]])

    def test_from_str_alias(self):
        self.assertEqual(Link.from_str("</a>"), Link.parse("</a>"))
        self.assertEqual(LinkItem.from_str("</a>"), LinkItem.parse("</a>"))

    def test_repr(self):
        self.assertEqual(repr(Link.parse("</a>; rel=up")), "Link([<LinkItem '/a' rel='up'>])")


class TestErrorHelp(unittest.TestCase):
    def test_without_hints(self):
        self.assertIsNone(InvalidLink().extra_help())
        self.assertIsNone(httplink.InvalidHeader().extra_help())

    def test_hints_not_shared(self):
        hints = {"original_text": "</a>;"}
        self.assertIn("trailing", InvalidLink().extra_help(hints))
        self.assertEqual(hints, {"original_text": "</a>;"})
        self.assertIsNone(InvalidLink().extra_help({}))


if __name__ == "__main__":
    unittest.main()
