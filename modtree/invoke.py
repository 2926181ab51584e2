from __future__ import annotations

import inspect
import logging
import os
from typing import Optional

from .declare import build_tree, iter_mods
from .errors import InvalidInvocationSiteError
from .fs_scan import walk
from .model import DeclarationTree, GenerateConfig
from .render import render_tree

logger = logging.getLogger(__name__)


def resolve_root(rel_path: str, config: GenerateConfig) -> str:
	project_root = config.project_root or os.getcwd()
	# An absolute rel_path replaces project_root.
	return os.path.join(project_root, rel_path)


def site_root(filename: str) -> str:
	"""Return the directory holding ``filename``, which must exist on disk.

	Code compiled from a string, the REPL and similar sources report
	pseudo file names such as ``<string>`` or ``<stdin>``.
	"""
	if filename.startswith("<") or not os.path.isfile(filename):
		raise InvalidInvocationSiteError(filename)
	return os.path.dirname(os.path.abspath(filename))


def _caller_filename(stacklevel: int) -> str:
	frame = inspect.currentframe()
	try:
		# One extra hop for the public function that called us.
		for _ in range(stacklevel + 1):
			if frame is None:
				break
			frame = frame.f_back
		if frame is None:
			return "<unknown>"
		return frame.f_code.co_filename
	finally:
		del frame


def _generate(root: str, config: GenerateConfig) -> DeclarationTree:
	entry = walk(root, sort_files=config.sort_files)
	tree = build_tree(entry, root, detect_collisions=config.detect_collisions)
	count = sum(1 for _ in iter_mods(tree.nodes))
	logger.info(f"Generated {count} module declarations for {root}")
	return tree


def generate_from_path(rel_path: str, config: Optional[GenerateConfig] = None) -> DeclarationTree:
	config = config or GenerateConfig()
	return _generate(resolve_root(rel_path, config), config)


def generate_from_site(config: Optional[GenerateConfig] = None, *, stacklevel: int = 1) -> DeclarationTree:
	"""Generate declarations for the directory of the calling source file.

	``stacklevel`` works like the one in ``warnings.warn``: 1 is the direct
	caller, 2 is its caller, and so on.
	"""
	config = config or GenerateConfig()
	root = site_root(_caller_filename(stacklevel))
	return _generate(root, config)


def generate_source(rel_path: str, config: Optional[GenerateConfig] = None) -> str:
	return render_tree(generate_from_path(rel_path, config))


def write_generated(tree: DeclarationTree, output_path: str) -> str:
	text = render_tree(tree)
	parent = os.path.dirname(output_path)
	if parent:
		os.makedirs(parent, exist_ok=True)
	with open(output_path, "w", encoding="utf-8", newline="\n") as fh:
		fh.write(text)
	logger.info(f"Module declarations written to: {output_path}")
	return text
