#!/usr/bin/env python3
"""
Fail if the navigation core imports the HTTP transport.
Checks the transport-independent modules under src/hyperclient/.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DIR = REPO_ROOT / "src" / "hyperclient"

CORE_MODULES = (
    "uri_template.py",
    "link.py",
    "resource.py",
    "collection.py",
)

FORBIDDEN_PREFIXES = (
    "httpx",
    "hyperclient.connection",
    "hyperclient.entry_point",
)

FORBIDDEN_RELATIVE = (
    "connection",
    "entry_point",
)


def is_forbidden(module: str) -> bool:
    return any(
        module == prefix or module.startswith(prefix + ".")
        for prefix in FORBIDDEN_PREFIXES
    )


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
                if mod in FORBIDDEN_RELATIVE:
                    errors.append(f"{path}: forbidden import '.{mod}'")
                continue
            if mod and is_forbidden(mod):
                errors.append(f"{path}: forbidden import '{mod}'")
    return errors


def main() -> int:
    violations: list[str] = []
    for name in CORE_MODULES:
        violations.extend(scan_file(PACKAGE_DIR / name))

    if violations:
        for v in violations:
            print(v, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
