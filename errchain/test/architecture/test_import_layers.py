from __future__ import annotations

from ._utils import iter_python_files, matches_prefix, package_root, parse_imports


def test_core_does_not_import_output() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / "core"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "errchain.output"):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "core -> output dependency violations:\n" + "\n".join(offenders)


def test_core_has_no_third_party_imports() -> None:
    root = package_root()
    offenders: list[str] = []

    for file_path in iter_python_files(root / "core"):
        rel = file_path.relative_to(root)
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}: third-party import '{item.module}'")

    assert not offenders, "core must stay dependency-free:\n" + "\n".join(offenders)
