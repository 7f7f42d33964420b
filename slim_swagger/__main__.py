import sys

from slim_swagger.cli import main

if __name__ == "__main__":
    sys.exit(main())
