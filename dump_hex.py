#!/usr/bin/env python3
"""Dumps files, hex strings or serial port captures as hex and ASCII."""

import sys

from bytedump.tool import main

sys.exit(main())
