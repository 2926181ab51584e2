from __future__ import annotations

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel


class FileEntry(BaseModel):
	kind: Literal["file"] = "file"
	name: str


class DirectoryEntry(BaseModel):
	kind: Literal["directory"] = "directory"
	name: str
	# Subdirectories first (sorted), then files in the order they were listed.
	children: Dict[str, Union[FileEntry, DirectoryEntry]] = {}


Entry = Union[FileEntry, DirectoryEntry]


class ModDecl(BaseModel):
	kind: Literal["mod"] = "mod"
	ident: str
	binding: str
	rel_path: str


class NamespaceDecl(BaseModel):
	kind: Literal["namespace"] = "namespace"
	ident: str
	binding: str
	rel_path: str
	children: List[Union[ModDecl, NamespaceDecl]] = []


DeclarationNode = Union[ModDecl, NamespaceDecl]


class DeclarationTree(BaseModel):
	root: str
	nodes: List[DeclarationNode] = []


class GenerateConfig(BaseModel):
	project_root: Optional[str] = None
	sort_files: bool = False
	detect_collisions: bool = True


DirectoryEntry.model_rebuild()
NamespaceDecl.model_rebuild()
DeclarationTree.model_rebuild()
