from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
PKG_ROOT = SRC_ROOT / "subshift"


def _module_name(py_file: Path) -> str:
    parts = list(py_file.relative_to(SRC_ROOT).with_suffix("").parts)
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)


def _top_level_names(tree: ast.Module) -> set[str]:
    names: set[str] = set()
    for node in tree.body:
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
            names.add(node.name)
        elif isinstance(node, ast.Assign):
            names.update(t.id for t in node.targets if isinstance(t, ast.Name))
        elif isinstance(node, ast.AnnAssign) and isinstance(node.target, ast.Name):
            names.add(node.target.id)
        elif isinstance(node, (ast.Import, ast.ImportFrom)):
            names.update((a.asname or a.name.split(".")[0]) for a in node.names if a.name != "*")
    return names


def _parse_all() -> dict[str, ast.Module]:
    return {_module_name(p): ast.parse(p.read_text(encoding="utf-8")) for p in PKG_ROOT.rglob("*.py")}


def _resolve(current: str, node: ast.ImportFrom, is_pkg: bool) -> str:
    if node.level == 0:
        return node.module or ""
    base = current.split(".")
    if not is_pkg:
        base = base[:-1]
    base = base[: len(base) - node.level + 1]
    return ".".join(base + ([node.module] if node.module else []))


def test_internal_from_imports_resolve() -> None:
    modules = _parse_all()
    exports = {name: _top_level_names(tree) for name, tree in modules.items()}
    packages = {_module_name(p) for p in PKG_ROOT.rglob("__init__.py")}

    problems: list[str] = []
    for current, tree in modules.items():
        for node in ast.walk(tree):
            if not isinstance(node, ast.ImportFrom):
                continue
            target = _resolve(current, node, current in packages)
            if not target.startswith("subshift"):
                continue
            for alias in node.names:
                if alias.name in exports.get(target, set()) or f"{target}.{alias.name}" in modules:
                    continue
                problems.append(f"{current}:{node.lineno} imports missing {alias.name!r} from {target!r}")

    assert not problems, "\n".join(problems)


def test_core_all_names_are_defined() -> None:
    tree = ast.parse((PKG_ROOT / "core" / "__init__.py").read_text(encoding="utf-8"))
    declared: list[str] = []
    for node in tree.body:
        if isinstance(node, ast.Assign) and any(isinstance(t, ast.Name) and t.id == "__all__" for t in node.targets):
            declared = [elt.value for elt in node.value.elts]  # type: ignore[attr-defined]

    assert declared
    missing = set(declared) - _top_level_names(tree)
    assert not missing, sorted(missing)
