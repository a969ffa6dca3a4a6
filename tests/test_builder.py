"""Tests for ReprBuilder.

Uses a small recording style so the builder's own behavior (delegation,
chaining, start/end markers, finalization) is checked independently of the
built-in ToStringStyle.
"""

import pytest

from reprkit import (
    BuilderStateError,
    InvalidArgumentError,
    ReprBuilder,
    TextBuffer,
    default_style_context,
    get_default_style,
    identity_to_string,
    reset_default_style,
    set_default_style,
)
from reprkit.styles import SHORT_PREFIX_STYLE


class BracketStyle:
    """Renders ``Type[name=value,...]`` and records every field call."""

    null_text = "<null>"

    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def append_start(self, buffer: TextBuffer, obj: object) -> None:
        if obj is not None:
            buffer.append("Type[")

    def append_end(self, buffer: TextBuffer, obj: object) -> None:
        buffer.remove_suffix(",")
        buffer.append("]")

    def append(self, buffer, field_name, value, full_detail=None) -> None:
        self.calls.append((field_name, value, full_detail))
        if field_name is not None:
            buffer.append(f"{field_name}=")
        buffer.append(str(value)).append(",")

    def append_super(self, buffer: TextBuffer, text: str) -> None:
        self.calls.append(("super", text))
        buffer.append(text).append(",")

    def append_to_string(self, buffer: TextBuffer, text: str) -> None:
        self.calls.append(("to_string", text))
        buffer.append(text).append(",")


class Target:
    pass


@pytest.fixture
def style() -> BracketStyle:
    return BracketStyle()


# =========================================================================
# Construction
# =========================================================================


class TestConstruction:
    """The start marker is written as soon as the builder exists."""

    def teardown_method(self) -> None:
        reset_default_style()

    def test_start_marker_written_immediately(self, style: BracketStyle) -> None:
        """Construction writes the style's start marker."""
        builder = ReprBuilder(Target(), style)
        assert builder.buffer.build() == "Type["

    def test_null_target_allowed(self, style: BracketStyle) -> None:
        """A None target is accepted and writes nothing yet."""
        builder = ReprBuilder(None, style)
        assert builder.target is None
        assert builder.buffer.build() == ""

    def test_uses_default_style_when_omitted(self, style: BracketStyle) -> None:
        """Omitting the style uses the current default."""
        set_default_style(style)
        builder = ReprBuilder(Target())
        assert builder.style is style

    def test_style_captured_at_construction(self, style: BracketStyle) -> None:
        """A later default change does not affect an existing builder."""
        builder = ReprBuilder(Target())
        original = get_default_style()
        set_default_style(style)
        assert builder.style is original
        assert ReprBuilder(Target()).style is style

    def test_caller_supplied_buffer(self, style: BracketStyle) -> None:
        """A caller's buffer is written into, after its existing text."""
        buf = TextBuffer("prefix:")
        builder = ReprBuilder(Target(), style, buf)
        assert builder.buffer is buf
        assert buf.build() == "prefix:Type["

    def test_accessors(self, style: BracketStyle) -> None:
        """target, style, buffer and finalized expose builder state."""
        target = Target()
        builder = ReprBuilder(target, style)
        assert builder.target is target
        assert builder.style is style
        assert isinstance(builder.buffer, TextBuffer)
        assert builder.finalized is False


# =========================================================================
# Appending
# =========================================================================


class TestAppend:
    """Every append is forwarded to the style as (field_name, value, full_detail)."""

    def test_labelled_fields(self, style: BracketStyle) -> None:
        """Labelled fields render in append order."""
        result = ReprBuilder(Target(), style).append("x", 1).append("y", 2).build()
        assert result == "Type[x=1,y=2]"

    def test_unlabelled_value(self, style: BracketStyle) -> None:
        """A single argument is appended without a field name."""
        result = ReprBuilder(Target(), style).append(42).build()
        assert result == "Type[42]"
        assert style.calls == [(None, 42, None)]

    def test_single_string_is_a_value_not_a_name(self, style: BracketStyle) -> None:
        """A lone string is the value, not a field name."""
        ReprBuilder(Target(), style).append("hello")
        assert style.calls == [(None, "hello", None)]

    def test_full_detail_forwarded(self, style: BracketStyle) -> None:
        """full_detail reaches the style unchanged, None included."""
        builder = ReprBuilder(Target(), style)
        builder.append("xs", [1, 2], full_detail=False)
        builder.append("ys", [3], full_detail=True)
        builder.append("zs", [4])
        assert style.calls == [("xs", [1, 2], False), ("ys", [3], True), ("zs", [4], None)]

    def test_unlabelled_value_with_full_detail(self, style: BracketStyle) -> None:
        """An explicit None name still carries full_detail."""
        ReprBuilder(Target(), style).append(None, [1], full_detail=False)
        assert style.calls == [(None, [1], False)]

    @pytest.mark.parametrize(
        "value",
        [None, True, -7, 2**70, 1.5, "c", "text", [], (), [None], b"\x00", {"k": 1}, {1}, Target()],
    )
    def test_any_value_is_delegated(self, style: BracketStyle, value: object) -> None:
        """Every kind of value is handed to the style as-is."""
        ReprBuilder(Target(), style).append("f", value)
        assert len(style.calls) == 1
        assert style.calls[0][1] is value

    def test_every_operation_returns_same_builder(self, style: BracketStyle) -> None:
        """All append operations return the builder itself."""
        builder = ReprBuilder(Target(), style)
        assert builder.append(1) is builder
        assert builder.append("a", 1) is builder
        assert builder.append("a", [1], full_detail=False) is builder
        assert builder.append_super("s") is builder
        assert builder.append_super(None) is builder
        assert builder.append_to_string("t") is builder
        assert builder.append_to_string(None) is builder
        assert builder.append_identity(Target()) is builder


class TestAppendSuperAndToString:
    """append_super / append_to_string forward non-None text only."""

    def test_super_forwarded(self, style: BracketStyle) -> None:
        """append_super passes its text to the style."""
        ReprBuilder(Target(), style).append_super("Base[a=1]")
        assert style.calls == [("super", "Base[a=1]")]

    def test_to_string_forwarded(self, style: BracketStyle) -> None:
        """append_to_string passes its text to the style."""
        ReprBuilder(Target(), style).append_to_string("Other[b=2]")
        assert style.calls == [("to_string", "Other[b=2]")]

    def test_none_is_a_no_op(self, style: BracketStyle) -> None:
        """None text is skipped by both operations."""
        plain = ReprBuilder(Target(), style).append("x", 1).build()
        with_nones = (
            ReprBuilder(Target(), style)
            .append_super(None)
            .append("x", 1)
            .append_to_string(None)
            .build()
        )
        assert with_nones == plain
        assert all(call[0] == "x" for call in style.calls)


class TestAppendIdentity:
    """append_identity writes identity text directly, bypassing the style."""

    def test_writes_identity_text(self, style: BracketStyle) -> None:
        """Identity text goes straight into the buffer."""
        other = Target()
        builder = ReprBuilder(Target(), style).append_identity(other)
        assert builder.buffer.build() == "Type[" + identity_to_string(other)
        assert style.calls == []

    def test_none_raises(self, style: BracketStyle) -> None:
        """append_identity(None) raises and writes nothing."""
        builder = ReprBuilder(Target(), style)
        with pytest.raises(InvalidArgumentError):
            builder.append_identity(None)
        assert builder.buffer.build() == "Type["

    def test_none_raises_value_error(self, style: BracketStyle) -> None:
        """The rejection can be caught as ValueError."""
        with pytest.raises(ValueError):
            ReprBuilder(Target(), style).append_identity(None)


# =========================================================================
# Finishing
# =========================================================================


class TestBuild:
    """build() writes the end (or null) marker exactly once."""

    def test_start_and_end_only(self, style: BracketStyle) -> None:
        """A builder with no fields renders its markers only."""
        assert ReprBuilder(Target(), style).build() == "Type[]"

    def test_null_target_gives_null_text(self, style: BracketStyle) -> None:
        """A None target builds to the null text."""
        assert ReprBuilder(None, style).build() == "<null>"

    def test_build_is_memoized(self, style: BracketStyle) -> None:
        """Repeated build() returns the same text and writes the end once."""
        builder = ReprBuilder(Target(), style).append("x", 1)
        first = builder.build()
        second = builder.build()
        assert first == second == "Type[x=1]"
        assert builder.buffer.build().count("]") == 1

    def test_null_build_is_memoized(self, style: BracketStyle) -> None:
        """Repeated build() of a None target stays the null text."""
        builder = ReprBuilder(None, style)
        builder.build()
        assert builder.build() == "<null>"

    def test_str_builds(self, style: BracketStyle) -> None:
        """str() finalizes the builder."""
        builder = ReprBuilder(Target(), style).append("x", 1)
        assert str(builder) == "Type[x=1]"
        assert builder.finalized is True
        assert builder.build() == "Type[x=1]"

    def test_repr_does_not_finalize(self, style: BracketStyle) -> None:
        """repr() describes the builder without building it."""
        builder = ReprBuilder(Target(), style)
        text = repr(builder)
        assert "open" in text
        assert builder.finalized is False
        assert builder.buffer.build() == "Type["

    @pytest.mark.parametrize(
        "operation",
        [
            lambda b: b.append(1),
            lambda b: b.append("x", 1),
            lambda b: b.append_super("Base[a=1]"),
            lambda b: b.append_to_string("Other[b=2]"),
            lambda b: b.append_identity(Target()),
        ],
    )
    def test_append_after_build_raises(self, style: BracketStyle, operation) -> None:
        """Every append operation raises once built."""
        builder = ReprBuilder(Target(), style)
        builder.build()
        with pytest.raises(BuilderStateError):
            operation(builder)
        assert builder.build() == "Type[]"

    def test_shared_buffer_composition(self) -> None:
        """Two builders can compose into one buffer."""
        buf = TextBuffer()
        ReprBuilder(Target(), SHORT_PREFIX_STYLE, buf).append("a", 1).build()
        buf.append(" / ")
        result = ReprBuilder(Target(), SHORT_PREFIX_STYLE, buf).append("b", 2).build()
        assert result == "Target[a=1] / Target[b=2]"


class TestDefaultStyleIntegration:
    """Builders without a style follow the process-wide default."""

    def test_default_style_output(self) -> None:
        """The initial default renders identity text and fields."""
        target = Target()
        assert ReprBuilder(target).append("x", 1).build() == identity_to_string(target) + "[x=1]"

    def test_context_default(self) -> None:
        """A temporary default applies to builders created inside it."""
        with default_style_context(SHORT_PREFIX_STYLE):
            assert ReprBuilder(Target()).append("x", 1).build() == "Target[x=1]"
