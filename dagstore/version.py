"""Version information."""

__version__ = "1.0.0"
__version_info__ = (1, 0, 0)

# Version history
CHANGELOG = """
# Changelog

## v1.0.0

**Graph store**

- Identity-keyed vertices with stable insertion indices
- Symmetric forward/backward adjacency
- Incrementally maintained source and sink sets
- Ancestor and descendant queries

**Traversals**

- Breadth-first
- Preorder depth-first
- Postorder depth-first

**Concurrency**

- Lock-wrapped store holding one exclusive lock per operation
- Snapshot copies for re-entrant callbacks

**Analysis**

- networkx export, opt-in cycle checks, statistics
- Tabular adjacency rendering

### Known Limitations

- No vertex or edge removal
- Acyclicity is not checked unless explicitly enabled
"""
