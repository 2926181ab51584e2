from __future__ import annotations

from typing import Optional


class ModTreeError(Exception):
	"""Base class for every failure raised while generating a module tree."""

	def __init__(self, message: str, path: Optional[str] = None):
		super().__init__(message)
		self.message = message
		self.path = path


class WalkIOError(ModTreeError):
	def __init__(self, path: str, cause: OSError):
		super().__init__(f"IO error at {path}: {cause}", path)
		self.cause = cause


class EncodingError(ModTreeError):
	def __init__(self, path: str, raw_name: bytes):
		super().__init__(f"Name is not valid unicode in {path}: {raw_name!r}", path)
		self.raw_name = raw_name


class UnsupportedEntryTypeError(ModTreeError):
	def __init__(self, path: str, entry_kind: str):
		super().__init__(f"Unsupported entry type ({entry_kind}): {path}", path)
		self.entry_kind = entry_kind


class InvalidInvocationSiteError(ModTreeError):
	def __init__(self, site: str):
		super().__init__(
			f"Cannot infer a scan root from {site!r}: not a file on disk",
			None,
		)
		self.site = site


class NameCollisionError(ModTreeError):
	def __init__(self, path: str, ident: str, first: str, second: str):
		super().__init__(
			f"{first!r} and {second!r} both map to module {ident!r} in {path or '.'}",
			path,
		)
		self.ident = ident
		self.bindings = (first, second)


class InvalidIdentifierError(ModTreeError):
	def __init__(self, path: str, ident: str):
		super().__init__(f"{ident!r} is not a valid module name: {path}", path)
		self.ident = ident
