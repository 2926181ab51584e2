from __future__ import annotations

from typing import Dict, Iterator, List

from .errors import InvalidIdentifierError, NameCollisionError
from .model import (
	DeclarationNode,
	DeclarationTree,
	DirectoryEntry,
	Entry,
	FileEntry,
	ModDecl,
	NamespaceDecl,
)
from .sanitize import is_valid_identifier, sanitize


def _join(rel_path: str, name: str) -> str:
	return f"{rel_path}/{name}" if rel_path else name


def check_siblings(parent: str, nodes: List[DeclarationNode]) -> None:
	"""Reject declarations that cannot coexist in one namespace."""
	seen: Dict[str, str] = {}
	for node in nodes:
		if not is_valid_identifier(node.ident):
			raise InvalidIdentifierError(node.rel_path, node.ident)
		if node.ident in seen:
			raise NameCollisionError(parent, node.ident, seen[node.ident], node.binding)
		seen[node.ident] = node.binding


def build(entry: Entry, *, rel_path: str = "", detect_collisions: bool = True) -> DeclarationNode:
	path = _join(rel_path, entry.name)
	if isinstance(entry, FileEntry):
		return ModDecl(ident=sanitize(entry.name, True), binding=entry.name, rel_path=path)

	children = [
		build(child, rel_path=path, detect_collisions=detect_collisions)
		for child in entry.children.values()
	]
	if detect_collisions:
		check_siblings(path, children)
	return NamespaceDecl(
		ident=sanitize(entry.name, False),
		binding=entry.name,
		rel_path=path,
		children=children,
	)


def build_tree(root_entry: DirectoryEntry, root: str, *, detect_collisions: bool = True) -> DeclarationTree:
	# The scanned directory is the enclosing module, so only its children are declared.
	nodes = [
		build(child, detect_collisions=detect_collisions)
		for child in root_entry.children.values()
	]
	if detect_collisions:
		check_siblings("", nodes)
	return DeclarationTree(root=root, nodes=nodes)


def iter_mods(nodes: List[DeclarationNode]) -> Iterator[ModDecl]:
	for node in nodes:
		if isinstance(node, ModDecl):
			yield node
		else:
			yield from iter_mods(node.children)
