"""Toy executable under test: prints its input file as hex bytes."""
import sys


def main() -> int:
    with open(sys.argv[1], "rb") as handle:
        data = handle.read()
    if not data:
        print("Error: empty program")
        return 1
    print(" ".join(f"{byte:02x}" for byte in data))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
