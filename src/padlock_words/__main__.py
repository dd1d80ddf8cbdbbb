import sys

from padlock_words.main import main

if __name__ == "__main__":
    sys.exit(main())
