"""Tests for Style and Script models and their natural ordering."""

import pytest

from resource_registry.resources import (
    DEFAULT_POSITION,
    Direction,
    Position,
    Resource,
    Script,
    Style,
    natural_key,
)


class TestNaturalKey:
    """Natural string ordering."""

    def test_numbers_compare_numerically(self):
        names = ["a10.css", "A2.css", "a1.css"]
        assert sorted(names, key=natural_key) == ["a1.css", "A2.css", "a10.css"]

    def test_case_only_differences_are_ordered(self):
        assert natural_key("a.css") != natural_key("A.css")
        assert sorted(["b", "A", "a"], key=natural_key) == ["A", "a", "b"]

    def test_none_sorts_as_empty(self):
        assert natural_key(None) == natural_key("")


class TestResource:
    """The shared resource base."""

    def test_empty_uri_becomes_none(self):
        assert Resource("").uri is None
        assert str(Resource("")) == ""

    def test_resources_are_hashable_and_equal_by_value(self):
        assert Style("/a.css", media="print") == Style("/a.css", media="print")
        assert len({Style("/a.css"), Style("/a.css")}) == 1

    def test_styles_and_scripts_do_not_compare(self):
        with pytest.raises(TypeError):
            sorted([Style("/a.css"), Script("/a.js")])

    def test_subclass_does_not_compare_with_base(self):
        """Differently shaped sort keys are never compared."""
        assert Style("/a.css").__lt__(Resource("/b.css")) is NotImplemented
        assert Resource("/b.css").__lt__(Style("/a.css")) is NotImplemented
        with pytest.raises(TypeError, match="not supported"):
            Style("/a.css") < Resource("/b.css")


class TestStyle:
    """Style attributes and default ordering."""

    def test_base_style_sorts_before_print_style(self):
        base = Style("/css/global.css")
        printed = Style("/css/global-print.css", media="print")
        assert sorted([printed, base]) == [base, printed]

    def test_direction_none_then_ltr_then_rtl(self):
        rtl = Style("/a.css", direction=Direction.RTL)
        ltr = Style("/b.css", direction=Direction.LTR)
        plain = Style("/c.css")
        assert sorted([rtl, ltr, plain]) == [plain, ltr, rtl]

    def test_crossorigin_then_disabled_break_ties(self):
        plain = Style("/a.css")
        disabled = Style("/a.css", disabled=True)
        anonymous = Style("/a.css", crossorigin="anonymous")
        credentials = Style("/a.css", crossorigin="use-credentials")
        assert sorted([credentials, disabled, anonymous, plain]) == [
            plain,
            disabled,
            anonymous,
            credentials,
        ]

    def test_media_is_trimmed_to_none(self):
        assert Style("/a.css", media="   ").media is None
        assert Style("/a.css", media=" print ").media == "print"

    def test_attributes_take_part_in_identity(self):
        assert Style("/a.css") != Style("/a.css", disabled=True)

    def test_str(self):
        assert str(Style("/a.css")) == "/a.css"
        style = Style("/a.css", media="print", direction=Direction.RTL, disabled=True)
        assert str(style) == '/a.css[media="print", direction=RTL, disabled]'

    def test_builder(self):
        style = (
            Style.builder()
            .uri("/a.css")
            .media("screen")
            .direction(Direction.LTR)
            .crossorigin("anonymous")
            .disabled()
            .build()
        )
        assert style == Style(
            "/a.css",
            media="screen",
            direction=Direction.LTR,
            crossorigin="anonymous",
            disabled=True,
        )


class TestDirection:
    """Direction lookup by language tag."""

    @pytest.mark.parametrize("language", ["ar", "ar-EG", "he_IL", "FA"])
    def test_rtl_languages(self, language):
        assert Direction.for_language(language) is Direction.RTL

    @pytest.mark.parametrize("language", ["en", "en-US", "de_DE", "zh-Hant"])
    def test_ltr_languages(self, language):
        assert Direction.for_language(language) is Direction.LTR


class TestScript:
    """Script attributes and default ordering."""

    def test_async_then_defer_then_uri(self):
        plain = Script("/a.js")
        deferred = Script("/b.js", defer=True)
        asynchronous = Script("/c.js", async_=True)
        assert sorted([plain, deferred, asynchronous]) == [asynchronous, deferred, plain]

    def test_uri_outranks_position(self):
        late = Script("/a.js", position=Position.BODY_END)
        early = Script("/b.js", position=Position.HEAD_START)
        assert sorted([early, late]) == [late, early]

    def test_position_then_crossorigin_break_ties(self):
        plain = Script("/a.js")
        anonymous = Script("/a.js", crossorigin="anonymous")
        head = Script("/a.js", position=Position.HEAD_START)
        body = Script("/a.js", position=Position.BODY_END)
        assert sorted([body, anonymous, plain, head]) == [head, plain, anonymous, body]

    def test_distinct_scripts_never_tie(self):
        scripts = [
            Script("/a.js"),
            Script("/a.js", position=Position.BODY_START),
            Script("/a.js", crossorigin="anonymous"),
            Script("/a.js", crossorigin="use-credentials"),
        ]
        for a in scripts:
            for b in scripts:
                if a != b:
                    assert (a < b) != (b < a)

    def test_default_position(self):
        assert Script("/a.js").position is DEFAULT_POSITION is Position.HEAD_END
        assert Script("/a.js", position=None).position is Position.HEAD_END

    def test_str(self):
        script = Script("/a.js", async_=True, defer=True, crossorigin="anonymous")
        assert str(script) == '/a.js[HEAD_END, async, defer, crossorigin="anonymous"]'

    def test_builder(self):
        script = (
            Script.builder()
            .uri("/a.js")
            .position(Position.BODY_START)
            .async_()
            .defer()
            .build()
        )
        assert script == Script("/a.js", position=Position.BODY_START, async_=True, defer=True)


class TestPosition:
    """Position parsing and ordering."""

    def test_ordinals_follow_document_order(self):
        assert [p.ordinal for p in Position] == [0, 1, 2, 3]
        assert Position.HEAD_START.ordinal < Position.BODY_END.ordinal

    @pytest.mark.parametrize(
        "value",
        ["body_end", "BODY_END", "body-end", " Body_End ", Position.BODY_END],
    )
    def test_parse(self, value):
        assert Position.parse(value) is Position.BODY_END

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown script position"):
            Position.parse("footer")
