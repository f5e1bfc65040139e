import sys

from bitsha1.compare import main

if __name__ == '__main__':
    sys.exit(main())
