"""Entry script for analyzing native library sizes with Bloaty."""

from native_sizes.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
