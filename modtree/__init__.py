"""Generate nested Rust module declarations from a source directory tree.

Modules:
- fs_scan.py: Directory walk, filtering and pruning of empty branches.
- sanitize.py: File and directory names to module identifiers.
- declare.py: Declaration tree construction and sibling name checks.
- render.py: Rust source text for a declaration tree.
- invoke.py: Scan root resolution and the public generate functions.
- model.py: Data structures for entries, declarations and config.
- errors.py: Exceptions raised by a generation pass.
"""

__all__ = [
	"fs_scan",
	"sanitize",
	"declare",
	"render",
	"invoke",
	"model",
	"errors",
]
