"""Command-line interface."""
from portfolio3d.main import main

if __name__ == "__main__":
    main()
