"""GraphQL layer: resolver root, capability groups and strawberry schema."""
