import sys

from draca.repl import main

sys.exit(main())
