"""Tests for syntax.ast: node tags, immutability, type guards."""

from __future__ import annotations

import dataclasses

import pytest

from ftlcanon.enums import NodeType
from ftlcanon.syntax.ast import (
    Comment,
    Entity,
    Identifier,
    JunkEntry,
    Keyword,
    Member,
    Pattern,
    QuotedPattern,
    Section,
    TextElement,
)


class TestNodeTags:
    """Every node class exposes its parser tag."""

    def test_tags_match_parser_strings(self) -> None:
        """StrEnum tags compare equal to plain strings."""
        assert Entity.type == "Entity"
        assert JunkEntry.type == "JunkEntry"
        assert Member.type == "Member"

    def test_quoted_pattern_shares_pattern_tag(self) -> None:
        """QuotedPattern is a Pattern variant."""
        assert QuotedPattern.type is NodeType.PATTERN
        assert Pattern.type is NodeType.PATTERN

    def test_tag_is_not_a_field(self) -> None:
        """The tag is class-level and not part of equality or construction."""
        names = [f.name for f in dataclasses.fields(Comment)]

        assert names == ["content"]
        assert Comment(content="x").type is NodeType.COMMENT


class TestNodeImmutability:
    """Nodes are frozen."""

    def test_cannot_assign(self) -> None:
        """Assignment raises FrozenInstanceError."""
        node = Identifier(name="a")

        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "b"  # type: ignore[misc]

    def test_replace_creates_new_node(self) -> None:
        """dataclasses.replace leaves the original unchanged."""
        entity = Entity(id=Identifier(name="a"), value=Pattern(elements=(TextElement(value="A"),)))

        renamed = dataclasses.replace(entity, id=Identifier(name="b"))

        assert entity.id.name == "a"
        assert renamed.id.name == "b"
        assert renamed.value is entity.value


class TestTypeGuards:
    """Static type guards on entry classes."""

    def test_entity_guard(self) -> None:
        """Entity.guard accepts entities only."""
        assert Entity.guard(Entity(id=Identifier(name="a"), value=None))
        assert not Entity.guard(Comment(content="x"))

    def test_section_guard(self) -> None:
        """Section.guard accepts sections only."""
        assert Section.guard(Section(key=Keyword(name="s")))
        assert not Section.guard(JunkEntry())
