"""Allow ``python -m ccswitch``."""

from ccswitch.cli import main

if __name__ == "__main__":
    main()
