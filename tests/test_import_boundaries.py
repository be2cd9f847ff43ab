"""
Import boundary guard for src/gdp/ui/.

Rule: UI files talk to the backend through the API client only. They must
never import sqlmodel, sqlalchemy, or any gdp ORM/DB modules (gdp.models,
gdp.db, gdp.infra.db) or use-case services.

KNOWN_LEGACY_VIOLATIONS is an explicit allowlist; the test fails both on a
new violation and on a stale allowlist entry.
"""

import ast
from collections.abc import Callable
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

UI_ROOT = Path(__file__).parent.parent / "src" / "gdp" / "ui"

# Banned top-level module names / prefixes detected via AST.
# Any `import X` or `from X ...` where X matches one of these is a violation.
BANNED_MODULES = {
    "sqlmodel",
    "sqlalchemy",
}
BANNED_PREFIXES = (
    "gdp.models",
    "gdp.db",
    "gdp.infra.db",
    "gdp.services",
)

# ---------------------------------------------------------------------------
# Known violations (keep empty).
# Paths are relative to the repo root (forward slashes, POSIX-style).
# ---------------------------------------------------------------------------

KNOWN_LEGACY_VIOLATIONS: set[str] = set()

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

REPO_ROOT = Path(__file__).parent.parent


def _is_banned_import(module_name: str) -> bool:
    """Return True if the module name is in the banned set or starts with a banned prefix."""
    if module_name in BANNED_MODULES:
        return True
    return any(module_name.startswith(prefix) for prefix in BANNED_PREFIXES)


def _file_imports_any(path: Path, is_banned: Callable[[str], bool]) -> bool:
    """Parse *path* with AST and return True if any import matches *is_banned*."""
    source = path.read_text(encoding="utf-8")
    try:
        tree = ast.parse(source, filename=str(path))
    except SyntaxError:
        return True

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                if is_banned(alias.name):
                    return True
        elif isinstance(node, ast.ImportFrom):
            if is_banned(node.module or ""):
                return True

    return False


def _file_has_banned_imports(path: Path) -> bool:
    """Return True if *path* contains any import banned for UI files."""
    return _file_imports_any(path, _is_banned_import)


def _collect_ui_python_files() -> list[Path]:
    """Walk src/gdp/ui/ and return all .py files."""
    return sorted(UI_ROOT.rglob("*.py"))


def _repo_relative(path: Path) -> str:
    """Return a POSIX-style path relative to the repo root."""
    return path.relative_to(REPO_ROOT).as_posix()


# ---------------------------------------------------------------------------
# Test
# ---------------------------------------------------------------------------


def test_ui_import_boundaries() -> None:
    """
    Actual violations must exactly equal KNOWN_LEGACY_VIOLATIONS.

    - Extra violation  → new file introduced a banned import (FAIL, fix the import)
    - Missing violation → a listed file no longer imports ORM (PASS after removing from allowlist)
    """
    actual_violations: set[str] = set()

    for py_file in _collect_ui_python_files():
        if _file_has_banned_imports(py_file):
            actual_violations.add(_repo_relative(py_file))

    extra = actual_violations - KNOWN_LEGACY_VIOLATIONS
    stale = KNOWN_LEGACY_VIOLATIONS - actual_violations

    messages: list[str] = []

    if extra:
        messages.append(
            "NEW ORM imports found in UI files not in the legacy allowlist "
            "(add API-client calls instead of ORM imports):\n"
            + "\n".join(f"  {p}" for p in sorted(extra))
        )

    if stale:
        messages.append(
            "Files listed in KNOWN_LEGACY_VIOLATIONS no longer have banned imports "
            "(remove them from the allowlist to record migration progress):\n"
            + "\n".join(f"  {p}" for p in sorted(stale))
        )

    assert not messages, "\n\n".join(messages)


def test_service_import_boundaries() -> None:
    """Service files must not import from fastapi."""
    services_root = REPO_ROOT / "src" / "gdp" / "services"
    _is_fastapi = lambda m: m.startswith("fastapi")  # noqa: E731
    violations = [
        _repo_relative(py_file)
        for py_file in sorted(services_root.rglob("*.py"))
        if _file_imports_any(py_file, _is_fastapi)
    ]
    assert not violations, (
        "Service files must not import fastapi:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_domain_import_boundaries() -> None:
    """Domain files stay free of web and ORM frameworks."""
    domain_root = REPO_ROOT / "src" / "gdp" / "domain"
    _is_framework = lambda m: m.split(".")[0] in {"fastapi", "sqlmodel", "sqlalchemy", "streamlit"}  # noqa: E731
    violations = [
        _repo_relative(py_file)
        for py_file in sorted(domain_root.rglob("*.py"))
        if _file_imports_any(py_file, _is_framework)
    ]
    assert not violations, (
        "Domain files must not import web/ORM frameworks:\n"
        + "\n".join(f"  {v}" for v in violations)
    )


def test_routers_import_only_what_they_use() -> None:
    """Routers stay thin: every name they import is referenced in the module."""
    routers_root = REPO_ROOT / "src" / "gdp" / "api" / "routers"
    unused: list[str] = []
    for py_file in sorted(routers_root.rglob("*.py")):
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
        imported: set[str] = set()
        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom) and node.module != "__future__":
                imported.update(alias.asname or alias.name for alias in node.names)
            elif isinstance(node, ast.Import):
                imported.update((alias.asname or alias.name).split(".")[0] for alias in node.names)
        used = {node.id for node in ast.walk(tree) if isinstance(node, ast.Name)}
        unused.extend(f"{_repo_relative(py_file)}: {name}" for name in sorted(imported - used))
    assert not unused, "Unused imports in routers:\n" + "\n".join(f"  {u}" for u in unused)
