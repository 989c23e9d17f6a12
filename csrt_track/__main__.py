import sys

from csrt_track.main import main

sys.exit(main())
