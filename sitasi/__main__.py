"""Allow running as ``python -m sitasi``."""

from sitasi.cli.main import main

if __name__ == "__main__":
    main()
