"""
Query building helpers shared by the read and write handlers.
"""

from typing import Dict, List, Optional


def build_projection_expression(fields: Optional[List[str]]) -> tuple[Optional[str], Optional[Dict[str, str]]]:
    """Build ProjectionExpression with ExpressionAttributeNames for DynamoDB operations.

    Every field goes through an expression attribute name, so reserved words
    such as ``name`` are safe to project.

    Args:
        fields: List of field names to project, None for all fields

    Returns:
        Tuple of (ProjectionExpression, ExpressionAttributeNames) or (None, None)

    Example:
        >>> build_projection_expression(['id', 'name'])
        ('#f0, #f1', {'#f0': 'id', '#f1': 'name'})
    """
    if not fields:
        return None, None

    expression_names = {}
    projection_parts = []

    for i, field in enumerate(fields):
        attr_name = f"#f{i}"
        expression_names[attr_name] = field
        projection_parts.append(attr_name)

    projection_expression = ', '.join(projection_parts)
    return projection_expression, expression_names
