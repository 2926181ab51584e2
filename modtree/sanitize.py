from __future__ import annotations

import string

SOURCE_SUFFIX = ".rs"

# Strict and reserved keywords across editions; usable as r#name.
RUST_KEYWORDS = frozenset(
	"abstract as async await become box break const continue do dyn else enum "
	"extern false final fn for gen if impl in let loop macro match mod move mut "
	"override priv pub ref return static struct trait true try type typeof "
	"unsafe unsized use virtual where while yield".split()
)
# Path keywords have no raw form.
UNUSABLE_NAMES = frozenset({"_", "crate", "self", "super", "Self"})


def _replace_dashes(name: str) -> str:
	return name.replace("-", "_")


def _prefix_digit(name: str) -> str:
	if name and name[0] in string.digits:
		return "_" + name
	return name


def _strip_suffix(name: str) -> str:
	if name.endswith(SOURCE_SUFFIX):
		return name[: -len(SOURCE_SUFFIX)]
	return name


def sanitize(raw_name: str, is_file: bool) -> str:
	"""Turn a file or directory name into a module identifier.

	The steps run in a fixed order: dashes become underscores, a leading
	ASCII digit gets an underscore prefix, and only then is the source
	suffix removed from file names. Directory names keep any suffix.
	"""
	name = _prefix_digit(_replace_dashes(raw_name))
	if is_file:
		name = _strip_suffix(name)
	return name


def is_valid_identifier(ident: str) -> bool:
	return ident.isidentifier() and ident not in UNUSABLE_NAMES


def rust_ident(ident: str) -> str:
	if ident in RUST_KEYWORDS:
		return "r#" + ident
	return ident
