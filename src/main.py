"""
Huffman code table report:
Usage example:
  py src/main.py report
  py src/main.py report -t a:5 b:9 c:12 d:13 e:16 f:45 --precision 4
  py src/main.py verify -c conf/example.yaml -s abcdef
  py src/main.py encode -t a:5 b:9 c:12 -s abcab --verbose

Without -t/-c the reference table a:5 b:9 c:12 d:13 e:16 f:45 is used.
"""

# =================================================================================================================

import sys

import cli

from Config import ConfigError
from utils import CodeLookupError, FrequencyTableError

# =================================================================================================================

def main(argv=None) -> int:

    parser = cli.init()
    args = parser.parse_args(argv)

    if not args.cmd:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except (FrequencyTableError, ConfigError, CodeLookupError, OSError) as e:
        print(f"[ERROR] {e}")
        return 1

# =================================================================================================================

if __name__ == "__main__":
    sys.exit(main())
