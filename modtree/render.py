from __future__ import annotations

from typing import List

from .model import DeclarationNode, DeclarationTree, ModDecl
from .sanitize import rust_ident

HEADER = "// @generated by modtree. Do not edit."
INDENT = "    "


def rust_string(value: str) -> str:
	escaped = value.replace("\\", "\\\\").replace('"', '\\"')
	return f'"{escaped}"'


def render_node(node: DeclarationNode, depth: int = 0) -> List[str]:
	pad = INDENT * depth
	lines: List[str] = [f"{pad}#[path = {rust_string(node.binding)}]"]
	if isinstance(node, ModDecl):
		lines.append(f"{pad}pub mod {rust_ident(node.ident)};")
		return lines
	lines.append(f"{pad}pub mod {rust_ident(node.ident)} {{")
	for child in node.children:
		lines.extend(render_node(child, depth + 1))
	lines.append(f"{pad}}}")
	return lines


def render_tree(tree: DeclarationTree) -> str:
	lines: List[str] = [HEADER]
	for node in tree.nodes:
		lines.extend(render_node(node))
	return "\n".join(lines) + "\n"
