#!/usr/bin/env python3
"""
Fail if core imports the resource layer.
Checks all Python files under src/terrakube_client/core/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE = "terrakube_client"
CORE_DIR = REPO_ROOT / "src" / PACKAGE / "core"

FORBIDDEN_PREFIXES = (
    "terrakube_client.models",
    "terrakube_client.services",
    "terrakube_client.client",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


def resolve_relative(path: Path, module: str, level: int) -> str:
    # core/foo.py lives in terrakube_client.core
    package = [PACKAGE] + list(path.relative_to(CORE_DIR.parent).parent.parts)
    base = package[: len(package) - (level - 1)] if level > 1 else package
    return ".".join(base + ([module] if module else []))


def scan_file(path: Path) -> list[str]:
    errors: list[str] = []
    tree = ast.parse(path.read_text())
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                mod = alias.name
                if is_forbidden(mod):
                    errors.append(f"{path}: forbidden import '{mod}'")
        elif isinstance(node, ast.ImportFrom):
            mod = node.module or ""
            if node.level:
                mod = resolve_relative(path, mod, node.level)
                candidates = [mod] + [f"{mod}.{a.name}" for a in node.names]
            else:
                candidates = [mod] if mod else []
            for candidate in candidates:
                if is_forbidden(candidate):
                    errors.append(f"{path}: forbidden import '{candidate}'")
                    break
    return errors


def main() -> int:
    violations: list[str] = []
    for py_file in CORE_DIR.rglob("*.py"):
        violations.extend(scan_file(py_file))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
