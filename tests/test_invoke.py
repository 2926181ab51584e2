import logging
import os
from textwrap import dedent

import pytest

from modtree.errors import InvalidInvocationSiteError, WalkIOError
from modtree.invoke import (
	generate_from_path,
	generate_from_site,
	generate_source,
	resolve_root,
	site_root,
	write_generated,
)
from modtree.model import GenerateConfig
from modtree.render import render_tree


SITE_SCRIPT = dedent(
	"""
	from modtree.invoke import generate_from_site

	def run(config=None):
		return generate_from_site(config)

	def run_for_caller():
		return generate_from_site(stacklevel=2)
	"""
)


def _load_site_script(filename):
	namespace = {}
	exec(compile(SITE_SCRIPT, filename, "exec"), namespace)
	return namespace


def test_generate_from_path_with_project_root(tmp_path, make_tree):
	make_tree(tmp_path / "crate", {"src": {"lib.rs": "", "a.rs": "", "io": {"fs.rs": ""}}})
	config = GenerateConfig(project_root=str(tmp_path / "crate"))
	tree = generate_from_path("src", config)
	assert tree.root == os.path.join(str(tmp_path / "crate"), "src")
	assert [node.ident for node in tree.nodes] == ["io", "a"]


def test_generate_from_path_defaults_to_cwd(tmp_path, make_tree, monkeypatch):
	make_tree(tmp_path, {"src": {"a.rs": ""}})
	monkeypatch.chdir(tmp_path)
	tree = generate_from_path("src")
	assert [node.binding for node in tree.nodes] == ["a.rs"]


def test_absolute_path_ignores_project_root(tmp_path):
	config = GenerateConfig(project_root="/somewhere/else")
	assert resolve_root(str(tmp_path), config) == str(tmp_path)


def test_generate_from_missing_path(tmp_path):
	with pytest.raises(WalkIOError):
		generate_from_path("nope", GenerateConfig(project_root=str(tmp_path)))


def test_generate_source(tmp_path, make_tree):
	make_tree(tmp_path / "src", {"only.rs": ""})
	text = generate_source("src", GenerateConfig(project_root=str(tmp_path)))
	assert text.splitlines()[1:] == ['#[path = "only.rs"]', "pub mod only;"]


def test_sort_files_config(tmp_path, make_tree):
	make_tree(tmp_path / "src", {"c.rs": "", "a.rs": "", "b.rs": ""})
	config = GenerateConfig(project_root=str(tmp_path), sort_files=True)
	tree = generate_from_path("src", config)
	assert [node.ident for node in tree.nodes] == ["a", "b", "c"]


def test_generation_is_logged(tmp_path, make_tree, caplog):
	make_tree(tmp_path / "src", {"a.rs": "", "b": {"c.rs": ""}})
	caplog.set_level(logging.INFO, logger="modtree")
	generate_from_path("src", GenerateConfig(project_root=str(tmp_path)))
	assert "Generated 2 module declarations" in caplog.text


def test_write_generated(tmp_path, make_tree):
	make_tree(tmp_path / "src", {"a.rs": "", "net": {"tcp.rs": ""}})
	tree = generate_from_path("src", GenerateConfig(project_root=str(tmp_path)))
	out = tmp_path / "target" / "gen" / "mods.rs"
	text = write_generated(tree, str(out))
	assert text == render_tree(tree)
	assert out.read_text(encoding="utf-8") == text


def test_generate_from_site_uses_caller_directory(tmp_path, make_tree):
	src = make_tree(tmp_path / "crate" / "src", {"a.rs": "", "net": {"tcp.rs": ""}})
	script = src / "build_mods.py"
	script.write_text(SITE_SCRIPT, encoding="utf-8")
	namespace = _load_site_script(str(script))
	tree = namespace["run"]()
	assert tree.root == str(src)
	assert {node.ident for node in tree.nodes} == {"net", "a"}


def test_generate_from_site_stacklevel(tmp_path):
	script = tmp_path / "helper.py"
	script.write_text(SITE_SCRIPT, encoding="utf-8")
	namespace = _load_site_script(str(script))
	tree = namespace["run_for_caller"]()
	assert tree.root == os.path.dirname(os.path.abspath(__file__))


def test_generate_from_site_without_file():
	namespace = _load_site_script("<string>")
	with pytest.raises(InvalidInvocationSiteError) as excinfo:
		namespace["run"]()
	assert excinfo.value.site == "<string>"


def test_generate_from_site_with_deleted_file(tmp_path):
	namespace = _load_site_script(str(tmp_path / "gone.py"))
	with pytest.raises(InvalidInvocationSiteError):
		namespace["run"]()


def test_site_root(tmp_path):
	script = tmp_path / "build.py"
	script.write_text("")
	assert site_root(str(script)) == str(tmp_path)
	with pytest.raises(InvalidInvocationSiteError):
		site_root("<stdin>")
