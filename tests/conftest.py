from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree() -> Callable[[Path, dict], Path]:
	"""Create files (str values) and directories (dict values) under root."""

	def _make_tree(root: Path, layout: dict) -> Path:
		root.mkdir(parents=True, exist_ok=True)
		for name, content in layout.items():
			path = root / name
			if isinstance(content, dict):
				_make_tree(path, content)
			else:
				path.write_text(content, encoding="utf-8")
		return root

	return _make_tree


@pytest.fixture
def example_root(tmp_path: Path, make_tree) -> Path:
	return make_tree(
		tmp_path / "root",
		{
			"a.rs": "",
			"1b.rs": "",
			"mod.rs": "",
			"lib.rs": "",
			"sub": {"c.rs": ""},
			"empty": {},
		},
	)
