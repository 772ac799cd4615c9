"""Plain-text rendering of an analyzed schema.

The output is used for display and verbatim as the LLM prompt payload, so
it must stay deterministic: the same AnalyzedSchema always renders to the
same text.
"""

from cachegen.core.entities.schema import AnalyzedSchema, Entity, Operation


def render_schema_summary(schema: AnalyzedSchema) -> str:
    """Render the schema analysis as a markdown-like document.

    Sections, in order: entity types (root types skipped), query
    operations, mutation operations (only if any), type relationships
    (only if any).

    Args:
        schema: The analyzed schema.

    Returns:
        The summary text.
    """
    lines: list[str] = ["# GraphQL Schema Analysis\n", "## Entity Types\n"]

    for entity in schema.entities:
        if entity.characteristics.is_root_type:
            continue
        lines.extend(_render_entity(entity))

    lines.append("## Query Operations\n")
    for query in schema.queries:
        lines.append(f"- {_render_signature(query)}")
    lines.append("")

    if schema.mutations:
        lines.append("## Mutation Operations\n")
        for mutation in schema.mutations:
            lines.append(f"- {_render_signature(mutation)}")
            if mutation.affected_types:
                lines.append(f"  Affects: {', '.join(mutation.affected_types)}")
        lines.append("")

    if schema.relationships:
        lines.append("## Type Relationships\n")
        for rel in schema.relationships:
            arrow = "->>" if rel.is_list else "->"
            lines.append(f"- {rel.source} {arrow} {rel.target} (via {rel.field_name})")

    return "\n".join(lines)


def _render_entity(entity: Entity) -> list[str]:
    lines = [f"### {entity.name}"]
    if entity.description:
        lines.append(f"Description: {entity.description}")

    lines.append(f"- Has ID: {'true' if entity.has_id else 'false'}")
    lines.append(f"- Fields: {', '.join(entity.field_names)}")

    if entity.references:
        lines.append(f"- References: {', '.join(entity.references)}")
    if entity.referenced_by:
        lines.append(f"- Referenced by: {', '.join(entity.referenced_by)}")

    traits = entity.characteristics.trait_labels()
    if traits:
        lines.append(f"- Characteristics: {', '.join(traits)}")

    lines.append("")
    return lines


def _render_signature(operation: Operation) -> str:
    args = ", ".join(f"{a.name}: {a.type_name}" for a in operation.arguments)
    return_type = (
        f"[{operation.return_type}]" if operation.returns_list else operation.return_type
    )
    return f"{operation.name}({args}): {return_type}"
