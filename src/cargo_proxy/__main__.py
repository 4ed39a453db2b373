"""Allow running as `python -m cargo_proxy`."""

from cargo_proxy.cli import main

if __name__ == "__main__":
    main()
