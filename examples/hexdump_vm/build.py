"""Installs vm.py as build/vm; ``--clean`` removes the build directory."""
import argparse
import shutil
import stat
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
BUILD_DIR = ROOT / "build"


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--clean", action="store_true")
    parser.add_argument("--check", action="store_true", help="Only compile, report syntax errors.")
    args = parser.parse_args()
    if args.clean:
        shutil.rmtree(BUILD_DIR, ignore_errors=True)
        return 0
    source = (ROOT / "vm.py").read_text(encoding="utf-8")
    try:
        compile(source, "vm.py", "exec")
    except SyntaxError as exc:
        print(f"vm.py:{exc.lineno}: {exc.msg}")
        return 1
    if args.check:
        return 0
    BUILD_DIR.mkdir(exist_ok=True)
    target = BUILD_DIR / "vm"
    target.write_text(f"#!{sys.executable}\n" + source, encoding="utf-8")
    target.chmod(target.stat().st_mode | stat.S_IXUSR)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
