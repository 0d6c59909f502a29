"""ftlcanon Quick Start - building, editing and re-emitting FTL resources.

Shows:
- Building a Resource AST by hand
- Loading the JSON tree a parser emits
- Editing a tree immutably and serializing it again
- Rendering single fragments with FTLSerializer.dump()

Python 3.13+.
"""

from __future__ import annotations

import json
from dataclasses import replace

from ftlcanon import serialize_ftl
from ftlcanon.syntax import FTLSerializer, load_json, to_dict
from ftlcanon.syntax.ast import (
    BuiltinReference,
    CallExpression,
    Comment,
    Entity,
    ExternalArgument,
    Identifier,
    Keyword,
    Member,
    Pattern,
    Placeable,
    Resource,
    Section,
    SelectExpression,
    TextElement,
)


def build_resource() -> Resource:
    """Build a small resource with a section and a select expression."""
    emails = Entity(
        id=Identifier(name="new-emails"),
        value=Pattern(
            elements=(
                Placeable(
                    expressions=(
                        SelectExpression(
                            expression=CallExpression(
                                callee=BuiltinReference(name="PLURAL"),
                                args=(ExternalArgument(name="count"),),
                            ),
                            variants=(
                                Member(
                                    key=Keyword(name="one"),
                                    value=Pattern(elements=(TextElement(value="One new email"),)),
                                ),
                                Member(
                                    key=Keyword(name="other"),
                                    value=Pattern(
                                        elements=(
                                            Placeable(expressions=(ExternalArgument(name="count"),)),
                                            TextElement(value=" new emails"),
                                        )
                                    ),
                                    default=True,
                                ),
                            ),
                        ),
                    )
                ),
            )
        ),
        comment=Comment(content="Shown in the inbox header"),
    )
    return Resource(
        comment=Comment(content="Mail client strings"),
        body=(Section(key=Keyword(name="inbox", namespace="mail"), body=(emails,)),),
    )


def main() -> None:
    resource = build_resource()
    print(serialize_ftl(resource, validate=True))

    # Trees travel as JSON between tools
    reloaded = load_json(json.dumps(to_dict(resource)))
    assert reloaded == resource

    # Edit: add a second entity to the section
    section = reloaded.body[0]
    assert isinstance(section, Section)
    about = Entity(
        id=Identifier(name="about"),
        value=Pattern(elements=(TextElement(value="Mail client\nVersion 2"),)),
    )
    edited = replace(reloaded, body=(replace(section, body=(*section.body, about)),))
    print(serialize_ftl(edited))

    # Fragments
    serializer = FTLSerializer()
    print(serializer.dump(about))
    print(serializer.dump(Placeable(expressions=(ExternalArgument(name="userName"),))))


if __name__ == "__main__":
    main()
