"""
Entry point.

Run: python -m storefront
"""

from storefront.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
