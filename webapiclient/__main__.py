import sys

from webapiclient.main import main

sys.exit(main())
