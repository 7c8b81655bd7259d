"""End-to-end field metadata scenarios over hand-built schema trees."""

from __future__ import annotations

from schema_field_meta.field_resolution import FieldMetadata, SchemaResolutionContext
from schema_field_meta.schema_model.schema_nodes import (
    ArrayNode,
    Constraint,
    ConstraintKind,
    Modifier,
    ObjectNode,
    PrimitiveKind,
    PrimitiveNode,
    WrapperNode,
)


def _string() -> PrimitiveNode:
    return PrimitiveNode(PrimitiveKind.STRING)


def test_scenario_required_optional_and_numeric_bounds() -> None:
    schema = ObjectNode(
        fields={
            "name": _string(),
            "nickname": WrapperNode(Modifier.OPTIONAL, _string()),
            "age": PrimitiveNode(
                PrimitiveKind.NUMBER,
                constraints=(
                    Constraint(ConstraintKind.MIN, 18),
                    Constraint(ConstraintKind.MAX, 100),
                ),
            ),
        }
    )
    context = SchemaResolutionContext(schema)

    assert context.is_required("name") is True
    assert context.is_required("nickname") is False
    assert context.field_metadata("age") == FieldMetadata(required=True, min=18, max=100)


def test_scenario_array_of_strings() -> None:
    context = SchemaResolutionContext(ObjectNode(fields={"tags": ArrayNode(_string())}))

    assert context.field_metadata("tags.0") == FieldMetadata(required=True)
    assert context.field_metadata("tags.abc") == FieldMetadata(required=False)


def test_scenario_optional_parent_does_not_make_child_optional() -> None:
    schema = ObjectNode(
        fields={"address": WrapperNode(Modifier.OPTIONAL, ObjectNode(fields={"city": _string()}))}
    )
    context = SchemaResolutionContext(schema)

    assert context.field_metadata("address.city") == FieldMetadata(required=True)
    assert context.is_required("address") is False


def test_scenario_unbound_context() -> None:
    context = SchemaResolutionContext()

    assert context.is_required("anything") is False
    assert context.field_metadata("anything") == FieldMetadata(required=False)


def test_array_index_invariance() -> None:
    context = SchemaResolutionContext(ObjectNode(fields={"items": ArrayNode(_string())}))

    assert context.field_metadata("items.0") == context.field_metadata("items.57")


def test_determinism_across_repeated_queries() -> None:
    schema = ObjectNode(
        fields={
            "nominees": ArrayNode(
                ObjectNode(
                    fields={
                        "share": WrapperNode(
                            Modifier.HAS_DEFAULT,
                            PrimitiveNode(
                                PrimitiveKind.NUMBER,
                                constraints=(Constraint(ConstraintKind.MAX, 100),),
                            ),
                        )
                    }
                )
            )
        }
    )
    context = SchemaResolutionContext(schema)

    for path in ("nominees.0.share", "nominees.9.share", "nominees.share", "nominees"):
        assert context.field_metadata(path) == context.field_metadata(path)
    assert context.field_metadata("nominees.2.share") == FieldMetadata(required=False, max=100)
