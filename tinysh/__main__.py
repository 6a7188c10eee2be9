import sys
from tinysh.main import main


if __name__ == "__main__":
    sys.exit(main())
