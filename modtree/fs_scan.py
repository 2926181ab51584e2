from __future__ import annotations

import logging
import os
import stat
from typing import Dict, List

from .errors import EncodingError, UnsupportedEntryTypeError, WalkIOError
from .model import DirectoryEntry, Entry, FileEntry
from .sanitize import SOURCE_SUFFIX

logger = logging.getLogger(__name__)


# Crate roots are never declared as nested modules.
ROOT_FILE_NAMES = frozenset({"lib.rs", "main.rs"})
DIR_MODULE_MARKER = "mod.rs"

_SPECIAL_KINDS = (
	(stat.S_ISSOCK, "socket"),
	(stat.S_ISFIFO, "fifo"),
	(stat.S_ISCHR, "character device"),
	(stat.S_ISBLK, "block device"),
)


def is_source_file(filename: str) -> bool:
	_, ext = os.path.splitext(filename)
	return ext == SOURCE_SUFFIX


def is_included_file(filename: str) -> bool:
	if not is_source_file(filename):
		return False
	if filename == DIR_MODULE_MARKER:
		return False
	return filename not in ROOT_FILE_NAMES


def _checked_name(dir_path: str, name: str) -> str:
	# Undecodable bytes come back from the OS as lone surrogates.
	try:
		name.encode("utf-8")
	except UnicodeEncodeError as e:
		raise EncodingError(dir_path, os.fsencode(name)) from e
	return name


def _entry_kind(entry: os.DirEntry) -> str:
	if entry.is_symlink():
		return "symlink"
	mode = entry.stat(follow_symlinks=False).st_mode
	for check, kind in _SPECIAL_KINDS:
		if check(mode):
			return kind
	return "unknown"


def _scan(path: str, sort_files: bool) -> Dict[str, Entry]:
	dirs: Dict[str, DirectoryEntry] = {}
	files: List[str] = []
	try:
		with os.scandir(path) as it:
			for entry in it:
				# Names are only decoded once they are kept.
				if entry.is_dir(follow_symlinks=False):
					children = _scan(entry.path, sort_files)
					if children:
						name = _checked_name(path, entry.name)
						dirs[name] = DirectoryEntry(name=name, children=children)
					else:
						logger.debug(f"Pruned empty directory: {entry.path!r}")
				elif entry.is_file(follow_symlinks=False):
					if is_included_file(entry.name):
						files.append(_checked_name(path, entry.name))
					else:
						logger.debug(f"Skipped file: {entry.path!r}")
				else:
					raise UnsupportedEntryTypeError(entry.path, _entry_kind(entry))
	except OSError as e:
		raise WalkIOError(path, e) from e

	if sort_files:
		files.sort()

	children: Dict[str, Entry] = {name: dirs[name] for name in sorted(dirs)}
	for name in files:
		children[name] = FileEntry(name=name)
	return children


def walk(path: str, sort_files: bool = False) -> DirectoryEntry:
	"""Scan ``path`` recursively and keep only what should become a module.

	Subdirectories whose whole subtree is filtered out are dropped. Symlinks
	and special files abort the walk instead of being skipped.
	"""
	name = _checked_name(path, os.path.basename(os.path.normpath(path)))
	return DirectoryEntry(name=name, children=_scan(path, sort_files))
