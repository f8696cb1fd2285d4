import sys
from perspective_guides.main import main

if __name__ == "__main__":
    sys.exit(main())
